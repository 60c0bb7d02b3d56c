"""
Fuzzy Matcher
Scores a query (one token, or a whole transcript) against every intent's keywords.

Scores are dissimilarities in [0, 1]: 0 means the keyword was found as-is,
1 means nothing in common. The metric tolerates speech-to-text noise through
a normalized Levenshtein distance and finds a keyword anywhere in the query:

- a keyword contained verbatim in the query scores 0;
- otherwise each keyword part (the keyword, plus each word of a multi-word
  keyword) is compared with every run of consecutive query words having the
  same word count, and the lowest normalized distance is kept.

Accents are significant: "legal" and "légal" are one substitution apart.

Given an ``ignore`` word set (the full-phrase fallback passes the stop-words),
windows made only of ignored or too-short words are skipped by the fuzzy pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from voxnav import config
from voxnav.nlu.catalog import CATALOG, Intent
from voxnav.nlu.tokenizer import strip_punctuation

logger = logging.getLogger("voxnav.interpreter.matcher")


@dataclass(frozen=True)
class MatchCandidate:
    intent: Intent
    score: float
    keyword: str
    query: str


def _keyword_parts(keyword: str) -> Tuple[str, ...]:
    words = keyword.split(" ")
    if len(words) == 1:
        return (keyword,)
    return (keyword,) + tuple(w for w in words if len(w) >= config.MIN_TOKEN_LENGTH)


def _windows(query_words: Sequence[str], size: int) -> List[str]:
    if len(query_words) <= size:
        return [" ".join(query_words)]
    return [
        " ".join(query_words[start:start + size])
        for start in range(len(query_words) - size + 1)
    ]


def _is_filler(window: str, ignore: FrozenSet[str]) -> bool:
    return all(len(w) < config.MIN_TOKEN_LENGTH or w in ignore for w in window.split(" "))


def keyword_score(query: str, keyword: str, ignore: Optional[FrozenSet[str]] = None) -> float:
    """
    Dissimilarity between a query and a single keyword.

    Both strings are normalized first (case, punctuation, whitespace). An empty
    query or keyword scores 1.0. When ``ignore`` is given, containment still
    scores 0 but windows of filler words are not fuzzy-compared.
    """
    q = strip_punctuation(query)
    k = strip_punctuation(keyword)
    if not q or not k:
        return 1.0
    if k in q:
        return 0.0

    query_words = q.split(" ")
    best = 1.0
    for part in _keyword_parts(k):
        for window in _windows(query_words, part.count(" ") + 1):
            if ignore is not None and _is_filler(window, ignore):
                continue
            distance = Levenshtein.normalized_distance(window, part)
            if distance < best:
                best = distance
    return min(max(best, 0.0), 1.0)


class FuzzyMatcher:
    """
    Ranks catalog intents for a query.

    Only intents scoring at or under ``cutoff`` are returned; an empty list
    means the query matched nothing at all.
    """

    def __init__(self, catalog: Sequence[Intent] = CATALOG, cutoff: float = config.MATCH_CUTOFF):
        self.catalog = tuple(catalog)
        self.cutoff = cutoff

    def score_intent(
        self, query: str, intent: Intent, ignore: Optional[FrozenSet[str]] = None
    ) -> Tuple[float, str]:
        """Return the intent's best (score, keyword); the first keyword wins ties."""
        best_score = 1.0
        best_keyword = intent.keywords[0]
        for keyword in intent.keywords:
            score = keyword_score(query, keyword, ignore)
            if score < best_score:
                best_score = score
                best_keyword = keyword
                if score == 0.0:
                    break
        return best_score, best_keyword

    def search(self, query: str, ignore: Optional[FrozenSet[str]] = None) -> List[MatchCandidate]:
        if not strip_punctuation(query):
            return []

        candidates: List[MatchCandidate] = []
        for intent in self.catalog:
            score, keyword = self.score_intent(query, intent, ignore)
            if score <= self.cutoff:
                candidates.append(MatchCandidate(intent=intent, score=score, keyword=keyword, query=query))

        # stable sort keeps catalog order among equal scores
        candidates.sort(key=lambda c: c.score)
        logger.debug(
            "query=%r candidates=%s",
            query,
            [(c.intent.id, round(c.score, 3)) for c in candidates],
        )
        return candidates

    def best(self, query: str, ignore: Optional[FrozenSet[str]] = None) -> Optional[MatchCandidate]:
        candidates = self.search(query, ignore)
        return candidates[0] if candidates else None
