"""
Tokenizer / Normalizer
Turns a raw speech-to-text transcript into the ordered list of words worth matching
"""

import re
from typing import FrozenSet, List, Optional

from voxnav import config

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\s]")

# Pronouns, articles, prepositions and the request verbs people put in front of
# a command ("je veux", "montre-moi", "ouvre"...).
FRENCH_STOP_WORDS: FrozenSet[str] = frozenset({
    # pronouns / possessives
    "je", "j'ai", "j’ai", "tu", "il", "elle", "nous", "vous", "ils", "elles",
    "moi", "toi", "lui", "leur", "leurs", "mon", "ton", "son", "mes", "tes",
    "ses", "notre", "votre", "nos", "vos", "cette", "ces", "cet", "ça", "cela",
    "c'est", "c’est", "s'il", "s’il",
    # articles
    "les", "des", "une", "aux",
    # prepositions / conjunctions
    "pour", "par", "avec", "sans", "dans", "sur", "sous", "chez", "vers",
    "mais", "donc", "puis", "alors", "aussi",
    # request / politeness verbs
    "veux", "voudrais", "voulais", "veut", "aimerais", "peux", "pourrais",
    "peut", "montre", "montrer", "montre-moi", "affiche", "afficher",
    "ouvre", "ouvrir", "ouvre-moi", "lance", "lancer", "aller", "allez",
    "vas", "voir", "fais", "faire", "donne", "donne-moi", "mets", "mettre",
    "est", "suis", "merci", "plait", "plaît", "svp", "stp", "bonjour",
    "ici", "là",
})


def normalize(text: Optional[str]) -> str:
    """Lowercase and collapse whitespace; punctuation is left alone."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def strip_punctuation(text: Optional[str]) -> str:
    """Lowercase, replace every non-word character by a space and collapse whitespace."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", _NON_WORD.sub(" ", text.lower())).strip()


def tokenize(
    transcript: Optional[str],
    stop_words: FrozenSet[str] = FRENCH_STOP_WORDS,
    min_length: int = config.MIN_TOKEN_LENGTH,
) -> List[str]:
    """
    Split a transcript on whitespace and keep the words that can carry an intent.

    Drops tokens shorter than ``min_length`` and any stop-word. The result keeps
    transcript order and may be empty.
    """
    tokens: List[str] = []
    for word in normalize(transcript).split(" "):
        if len(word) < min_length:
            continue
        if word in stop_words:
            continue
        tokens.append(word)
    return tokens
