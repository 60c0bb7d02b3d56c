from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class FeedbackSeverity(str, Enum):
    SUCCESS = "success"
    INFO = "info"


class Feedback(BaseModel):
    message: str
    severity: FeedbackSeverity = FeedbackSeverity.SUCCESS


class NavigationCommand(BaseModel):
    # full router target, query string included
    path: str
    # only the parameters added from the transcript
    query_params: Dict[str, str] = Field(default_factory=dict)
    feedback: str

    @property
    def href(self) -> str:
        return self.path


class InterpretRequest(BaseModel):
    transcript: str


class ExtractedParamsOut(BaseModel):
    amount: Optional[str] = None
    label: Optional[str] = None


class InterpretResponse(BaseModel):
    transcript: str
    accepted: bool
    intent_id: Optional[str] = None
    score: float
    matched_query: Optional[str] = None
    matched_keyword: Optional[str] = None
    params: ExtractedParamsOut = Field(default_factory=ExtractedParamsOut)
    navigation: Optional[NavigationCommand] = None
    feedback: Feedback
    stages: List[str] = Field(default_factory=list)


class IntentOut(BaseModel):
    id: str
    keywords: List[str]
    path: str
    feedback: str
    parameterized: bool = False
