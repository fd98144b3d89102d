"""Configuration: environment settings and rule constants."""

from formcheck.config.settings import (
    PROJECT_ROOT,
    DB_PATH,
    HISTORY_LIMIT,
    SUCCESS_BANNER_SECONDS,
    LOG_LEVEL,
    VERBOSE,
    configure_logging,
)
from formcheck.config.constants import (
    NATIONAL_ID_DIGITS,
    PHONE_MIN_DIGITS,
    PHONE_MAX_DIGITS,
    POSTAL_CODE_DIGITS,
    MINIMUM_AGE,
    DEFAULT_FORM_ID,
    SUCCESS_MESSAGE,
)

__all__ = [
    # Settings
    "PROJECT_ROOT",
    "DB_PATH",
    "HISTORY_LIMIT",
    "SUCCESS_BANNER_SECONDS",
    "LOG_LEVEL",
    "VERBOSE",
    "configure_logging",
    # Constants
    "NATIONAL_ID_DIGITS",
    "PHONE_MIN_DIGITS",
    "PHONE_MAX_DIGITS",
    "POSTAL_CODE_DIGITS",
    "MINIMUM_AGE",
    "DEFAULT_FORM_ID",
    "SUCCESS_MESSAGE",
]
