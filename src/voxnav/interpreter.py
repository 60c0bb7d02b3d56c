"""
voxnav/interpreter.py

Voice-command interpreter: transcript in, navigation command and/or feedback out.

Pipeline: tokenize -> fuzzy match per token (full phrase as fallback) ->
accept/reject -> extract params from the original transcript -> dispatch.
No state is kept between two calls; the catalog is read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from voxnav.dispatcher import Dispatcher
from voxnav.nlu.catalog import CATALOG, Intent
from voxnav.nlu.entity_resolver import EntityResolver, ExtractedParams
from voxnav.nlu.intent_classifier import IntentClassifier, MatchDecision
from voxnav.schemas.api_models import (
    ExtractedParamsOut,
    Feedback,
    InterpretResponse,
    NavigationCommand,
)

logger = logging.getLogger("voxnav.interpreter")


class Stage(str, Enum):
    RECEIVED = "received"
    TOKENIZED = "tokenized"
    MATCHED = "matched"
    EXTRACTED = "extracted"
    DISPATCHED = "dispatched"
    FEEDBACK_ONLY = "feedback_only"


@dataclass
class InterpretationResult:
    transcript: str
    accepted: bool
    score: float
    feedback: Feedback
    intent: Optional[Intent] = None
    matched_query: Optional[str] = None
    matched_keyword: Optional[str] = None
    params: ExtractedParams = field(default_factory=ExtractedParams)
    command: Optional[NavigationCommand] = None
    stages: List[Stage] = field(default_factory=list)

    @property
    def intent_id(self) -> Optional[str]:
        return self.intent.id if self.intent is not None else None

    def to_response(self) -> InterpretResponse:
        return InterpretResponse(
            transcript=self.transcript,
            accepted=self.accepted,
            intent_id=self.intent_id,
            score=round(self.score, 4),
            matched_query=self.matched_query,
            matched_keyword=self.matched_keyword,
            params=ExtractedParamsOut(**self.params.to_dict()),
            navigation=self.command,
            feedback=self.feedback,
            stages=[stage.value for stage in self.stages],
        )


class VoiceCommandInterpreter:
    """
    Maps one French transcript onto one catalog intent.

    ``interpret`` never raises: an unmatched (or empty) transcript ends in a
    "not understood" feedback with no navigation command.
    """

    def __init__(
        self,
        catalog: Sequence[Intent] = CATALOG,
        dispatcher: Optional[Dispatcher] = None,
        classifier: Optional[IntentClassifier] = None,
        resolver: Optional[EntityResolver] = None,
    ):
        self.catalog = tuple(catalog)
        self.classifier = classifier or IntentClassifier(self.catalog)
        self.resolver = resolver or EntityResolver()
        self.dispatcher = dispatcher or Dispatcher()

    def interpret(self, transcript: Optional[str]) -> InterpretationResult:
        transcript = transcript or ""
        stages = [Stage.RECEIVED]
        logger.debug("Transcript received: %r", transcript)

        decision: MatchDecision = self.classifier.classify(transcript)
        # classify() tokenizes then matches; both stages are recorded once it returns
        stages.extend([Stage.TOKENIZED, Stage.MATCHED])

        candidate = decision.candidate
        if not decision.accepted:
            feedback = self.dispatcher.reject(transcript)
            stages.append(Stage.FEEDBACK_ONLY)
            return InterpretationResult(
                transcript=transcript,
                accepted=False,
                score=decision.score,
                feedback=feedback,
                matched_query=candidate.query if candidate else None,
                matched_keyword=candidate.keyword if candidate else None,
                stages=stages,
            )

        intent = decision.intent
        params = ExtractedParams()
        if self.resolver.has_extractor(intent):
            params = self.resolver.extract_entities(transcript, intent)
            stages.append(Stage.EXTRACTED)

        command, feedback = self.dispatcher.dispatch(intent, params)
        stages.append(Stage.DISPATCHED)
        return InterpretationResult(
            transcript=transcript,
            accepted=True,
            score=decision.score,
            feedback=feedback,
            intent=intent,
            matched_query=candidate.query,
            matched_keyword=candidate.keyword,
            params=params,
            command=command,
            stages=stages,
        )


_default_interpreter: Optional[VoiceCommandInterpreter] = None


def default_interpreter() -> VoiceCommandInterpreter:
    global _default_interpreter
    if _default_interpreter is None:
        _default_interpreter = VoiceCommandInterpreter()
    return _default_interpreter


def interpret(transcript: Optional[str]) -> InterpretationResult:
    return default_interpreter().interpret(transcript)
