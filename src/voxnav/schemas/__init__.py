"""
Schemas for the voice-command service
"""

from .api_models import (  # noqa: F401
    ExtractedParamsOut,
    Feedback,
    FeedbackSeverity,
    IntentOut,
    InterpretRequest,
    InterpretResponse,
    NavigationCommand,
)
