"""
Intent Classification Module
Picks the single best intent for a transcript and decides whether to accept it
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence

from voxnav import config
from voxnav.nlu.catalog import CATALOG, Intent
from voxnav.nlu.fuzzy_matcher import FuzzyMatcher, MatchCandidate
from voxnav.nlu.tokenizer import FRENCH_STOP_WORDS, normalize, tokenize

logger = logging.getLogger("voxnav.interpreter.classifier")


@dataclass
class MatchDecision:
    """Outcome of best-match selection for one transcript."""

    candidate: Optional[MatchCandidate]
    score: float
    accepted: bool
    tokens: List[str]
    used_fallback: bool = False

    @property
    def intent(self) -> Optional[Intent]:
        if self.accepted and self.candidate is not None:
            return self.candidate.intent
        return None


class IntentClassifier:
    """
    Classifies navigation intents from speech-to-text transcripts.

    Every token is matched in transcript order and the running best is only
    replaced on a strictly lower score, so the first token reaching a given
    score keeps it. When no token produces any candidate the whole transcript
    is tried once as a single query; that pass skips the stop-words the
    tokenizer dropped, so filler words alone never match.
    """

    def __init__(
        self,
        catalog: Sequence[Intent] = CATALOG,
        threshold: float = config.ACCEPT_THRESHOLD,
        matcher: Optional[FuzzyMatcher] = None,
        stop_words: FrozenSet[str] = FRENCH_STOP_WORDS,
    ):
        self.matcher = matcher or FuzzyMatcher(catalog)
        self.threshold = threshold
        self.stop_words = stop_words

    def select(
        self, queries: Sequence[str], ignore: Optional[FrozenSet[str]] = None
    ) -> Optional[MatchCandidate]:
        best: Optional[MatchCandidate] = None
        best_score = config.NO_MATCH_SCORE
        for query in queries:
            top = self.matcher.best(query, ignore)
            if top is None:
                continue
            if top.score < best_score:
                best = top
                best_score = top.score
        return best

    def classify(self, transcript: Optional[str]) -> MatchDecision:
        tokens = tokenize(transcript, self.stop_words)
        logger.debug("Tokens: %s", tokens)
        best = self.select(tokens)

        used_fallback = False
        if best is None:
            phrase = normalize(transcript)
            if phrase:
                logger.debug("No token matched; retrying with full phrase %r", phrase)
                best = self.select([phrase], ignore=self.stop_words)
                used_fallback = True

        score = best.score if best is not None else config.NO_MATCH_SCORE
        accepted = best is not None and score < self.threshold

        if accepted:
            logger.info(
                "Accepted intent=%s score=%.3f query=%r keyword=%r fallback=%s",
                best.intent.id,
                score,
                best.query,
                best.keyword,
                used_fallback,
            )
        else:
            logger.info(
                "Rejected transcript=%r best=%s score=%.3f",
                transcript,
                best.intent.id if best is not None else None,
                score,
            )

        return MatchDecision(
            candidate=best,
            score=score,
            accepted=accepted,
            tokens=tokens,
            used_fallback=used_fallback,
        )
