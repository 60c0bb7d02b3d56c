"""
voxnav/nlu

Matching and extraction for voice commands:
- tokenizer.py: transcript normalization and stop-word filtering
- catalog.py: the static intent catalog
- fuzzy_matcher.py: keyword dissimilarity scoring
- intent_classifier.py: best-match selection and acceptance
- entity_resolver.py: amount / label extraction
"""

from .catalog import CATALOG, Intent, IntentKind  # noqa: F401
from .entity_resolver import EntityResolver, ExtractedParams  # noqa: F401
from .fuzzy_matcher import FuzzyMatcher, MatchCandidate, keyword_score  # noqa: F401
from .intent_classifier import IntentClassifier, MatchDecision  # noqa: F401
from .tokenizer import tokenize  # noqa: F401
