"""
Global settings loaded from environment variables.

All settings have sensible defaults so forms work out of the box.
Override via .env file or environment variables.
"""

import logging
import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()
DB_PATH = os.getenv("FORMCHECK_DB_PATH", str(PROJECT_ROOT / "data" / "formcheck.db"))

# =============================================================================
# Submissions
# =============================================================================
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "10"))
SUCCESS_BANNER_SECONDS = float(os.getenv("SUCCESS_BANNER_SECONDS", "5"))

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = None):
    """Apply the standard log format at LOG_LEVEL (or the given level)."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
