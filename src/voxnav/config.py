"""Configuration constants and environment overrides for the voice-command interpreter."""

import os
from pathlib import Path

# =============================
# Path Configuration
# =============================
BASE_DIR = Path(__file__).resolve().parent
PROJECT_DIR = BASE_DIR.parent.parent
LOG_DIR = Path(os.getenv("VOXNAV_LOG_DIR", str(PROJECT_DIR / "logs")))

# =============================
# Matching Configuration
# =============================
ACCEPT_THRESHOLD = 0.5  # best score must be strictly below this to accept
MATCH_CUTOFF = 0.6      # keywords scoring above this are not candidates at all
NO_MATCH_SCORE = 1.0    # running best before any candidate is seen
MIN_TOKEN_LENGTH = 3    # tokens of length <= 2 are dropped

# =============================
# Feedback Configuration
# =============================
NOT_UNDERSTOOD_TEMPLATE = 'Je n\'ai pas compris : "{transcript}"'
CURRENCY_SYMBOL = "€"

# =============================
# HTTP Service
# =============================
HOST = os.getenv("VOXNAV_HOST", "0.0.0.0")
PORT = int(os.getenv("VOXNAV_PORT", "8100"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("VOXNAV_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
