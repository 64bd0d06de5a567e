"""
Central configuration values for the amdis package.

Values that depend on the environment are read once, at import time.
"""

import os
from pathlib import Path

# ============================================================================
# Input
# ============================================================================

# Used for bytes input and for files read from disk
DEFAULT_ENCODING = "utf-8"

# ============================================================================
# Logging
# ============================================================================

# Directory holding the log file (override with AMDIS_APP_DIR)
APP_DIR = Path(os.environ.get("AMDIS_APP_DIR", Path.home() / ".amdis_app")).expanduser()
LOG_FILE_NAME = "amdis.log"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = os.environ.get("AMDIS_LOG_LEVEL", "INFO").upper()
