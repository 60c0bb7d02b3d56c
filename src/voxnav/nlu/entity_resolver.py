"""
Entity Resolution Module
Extracts amounts and labels (shop, organism...) from the original transcript
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Optional

from voxnav.nlu.catalog import Intent
from voxnav.nlu.tokenizer import normalize

logger = logging.getLogger("voxnav.interpreter.entities")

AMOUNT_PATTERN = re.compile(r"(\d+(?:[.,]\d+)?)\s*(?:euros?|€)?")
LABEL_PATTERN = re.compile(
    r"\b(?:pour|chez|à)\s+(?:(?:les|le|la)\s+|l['’]\s*)?([a-z0-9 àâäçéèêëîïôöùûüÿœæ]+)"
)


@dataclass(frozen=True)
class ExtractedParams:
    amount: Optional[Decimal] = None
    label: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.amount is None and self.label is None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "amount": format_amount(self.amount) if self.amount is not None else None,
            "label": self.label,
        }


def format_amount(amount: Decimal) -> str:
    """Render an amount the way it was spoken, with a dot separator (``50``, ``12.50``)."""
    return str(amount)


def extract_amount(transcript: Optional[str]) -> Optional[Decimal]:
    """First decimal number of the transcript, comma or dot separated."""
    match = AMOUNT_PATTERN.search(normalize(transcript))
    if not match:
        return None
    try:
        return Decimal(match.group(1).replace(",", "."))
    except InvalidOperation:
        logger.warning("Unparseable amount %r in %r", match.group(1), transcript)
        return None


def extract_label(transcript: Optional[str]) -> Optional[str]:
    """
    Words following "pour", "chez" or "à" (after an optional le/la/les/l').

    Captures shorter than 3 characters, or starting with a digit (the amount
    itself, as in "à 50 euros"), are dropped.
    """
    match = LABEL_PATTERN.search(normalize(transcript))
    if not match:
        return None
    label = match.group(1).strip()
    if len(label) <= 2 or label[0].isdigit():
        return None
    return label


def extract_expense(transcript: Optional[str]) -> ExtractedParams:
    return ExtractedParams(amount=extract_amount(transcript), label=extract_label(transcript))


def extract_letter(transcript: Optional[str]) -> ExtractedParams:
    return ExtractedParams(label=extract_label(transcript))


Extractor = Callable[[Optional[str]], ExtractedParams]

EXTRACTORS: Dict[str, Extractor] = {
    "add_expense": extract_expense,
    "editor": extract_letter,
}


class EntityResolver:
    """
    Runs the extractor registered for an intent, if any
    """

    def __init__(self, extractors: Optional[Dict[str, Extractor]] = None):
        self.extractors = dict(EXTRACTORS if extractors is None else extractors)

    def has_extractor(self, intent: Intent) -> bool:
        return intent.is_parameterized and intent.id in self.extractors

    def extract_entities(self, transcript: Optional[str], intent: Intent) -> ExtractedParams:
        """
        Extract the parameters relevant to ``intent`` from the unfiltered transcript.
        A simple intent, or a missing extractor, yields empty params.
        """
        if not self.has_extractor(intent):
            return ExtractedParams()
        params = self.extractors[intent.id](transcript)
        logger.debug("intent=%s extracted=%s", intent.id, params.to_dict())
        return params
