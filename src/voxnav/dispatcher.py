"""
Dispatcher
Turns an accepted intent (plus extracted params) into a navigation command and
a feedback message, and hands both to the router / notifier collaborators.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import quote

from voxnav import config
from voxnav.nlu.catalog import Intent
from voxnav.nlu.entity_resolver import ExtractedParams, format_amount
from voxnav.schemas.api_models import Feedback, FeedbackSeverity, NavigationCommand

logger = logging.getLogger("voxnav.interpreter.dispatcher")

RouterCallback = Callable[[str, Dict[str, str]], None]
NotifierCallback = Callable[[str, FeedbackSeverity], None]


def append_query(path: str, params: Dict[str, str]) -> str:
    """Append ``params`` to ``path``, continuing an existing query string if there is one."""
    if not params:
        return path
    separator = "&" if "?" in path else "?"
    query = "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in params.items())
    return f"{path}{separator}{query}"


def _spoken_amount(params: ExtractedParams) -> str:
    return f"{format_amount(params.amount).replace('.', ',')} {config.CURRENCY_SYMBOL}"


def _expense_feedback(intent: Intent, params: ExtractedParams) -> str:
    if params.amount is not None and params.label:
        return f"Nouvelle dépense : {_spoken_amount(params)} pour {params.label}"
    if params.amount is not None:
        return f"Nouvelle dépense : {_spoken_amount(params)}"
    return f"Nouvelle dépense pour {params.label}"


def _letter_feedback(intent: Intent, params: ExtractedParams) -> str:
    return f"Rédaction d'une lettre pour {params.label}"


def _generic_feedback(intent: Intent, params: ExtractedParams) -> str:
    details = []
    if params.amount is not None:
        details.append(f"montant {_spoken_amount(params)}")
    if params.label:
        details.append(params.label)
    return f"{intent.feedback} ({', '.join(details)})"


FEEDBACK_COMPOSERS: Dict[str, Callable[[Intent, ExtractedParams], str]] = {
    "add_expense": _expense_feedback,
    "editor": _letter_feedback,
}


def not_understood(transcript: Optional[str]) -> str:
    return config.NOT_UNDERSTOOD_TEMPLATE.format(transcript=transcript or "")


class Dispatcher:
    """
    Builds the outputs of an interpretation and forwards them.

    ``router(path, query_params)`` and ``notifier(message, severity)`` are the
    external collaborators; both are optional. An exception raised by either is
    logged and does not abort the interpretation.
    """

    def __init__(
        self,
        router: Optional[RouterCallback] = None,
        notifier: Optional[NotifierCallback] = None,
    ):
        self.router = router
        self.notifier = notifier

    def query_params(self, intent: Intent, params: ExtractedParams) -> Dict[str, str]:
        if not intent.is_parameterized or params.is_empty:
            return {}

        query: Dict[str, str] = dict(intent.extra_params)
        amount_key = intent.query_key("amount")
        if amount_key and params.amount is not None:
            query[amount_key] = format_amount(params.amount)
        label_key = intent.query_key("label")
        if label_key and params.label:
            query[label_key] = params.label

        # nothing this intent cares about was found
        if len(query) == len(intent.extra_params):
            return {}
        return query

    def feedback_message(self, intent: Intent, params: ExtractedParams, query: Dict[str, str]) -> str:
        if not query:
            return intent.feedback
        composer = FEEDBACK_COMPOSERS.get(intent.id, _generic_feedback)
        return composer(intent, params)

    def build_command(self, intent: Intent, params: Optional[ExtractedParams] = None) -> NavigationCommand:
        params = params or ExtractedParams()
        if intent.is_parameterized:
            query = self.query_params(intent, params)
            return NavigationCommand(
                path=append_query(intent.path, query),
                query_params=query,
                feedback=self.feedback_message(intent, params, query),
            )
        return NavigationCommand(path=intent.path, query_params={}, feedback=intent.feedback)

    def dispatch(
        self, intent: Intent, params: Optional[ExtractedParams] = None
    ) -> Tuple[NavigationCommand, Feedback]:
        command = self.build_command(intent, params)
        feedback = Feedback(message=command.feedback, severity=FeedbackSeverity.SUCCESS)
        logger.info("Dispatching intent=%s path=%s", intent.id, command.path)
        self._navigate(command)
        self._notify(feedback)
        return command, feedback

    def reject(self, transcript: Optional[str]) -> Feedback:
        feedback = Feedback(message=not_understood(transcript), severity=FeedbackSeverity.INFO)
        self._notify(feedback)
        return feedback

    def _navigate(self, command: NavigationCommand) -> None:
        if self.router is None:
            return
        try:
            self.router(command.path, dict(command.query_params))
        except Exception as e:
            logger.exception("Router failed for path=%s: %s", command.path, e)

    def _notify(self, feedback: Feedback) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier(feedback.message, feedback.severity)
        except Exception as e:
            logger.exception("Notifier failed for message=%r: %s", feedback.message, e)
