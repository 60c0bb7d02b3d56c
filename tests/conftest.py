from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

# keep test runs from writing into the project's logs/ directory
os.environ.setdefault("VOXNAV_LOG_DIR", tempfile.mkdtemp(prefix="voxnav-logs-"))
