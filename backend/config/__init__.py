import logging

from .settings import Settings, get_settings

def resolve_log_level(name) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO

logging.basicConfig(
    level=resolve_log_level(get_settings().LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("truthguard")

from .constants import (
    ANALYZER_CONFIG,
    SUMMARY_TEMPLATES,
    SEARCH_CONFIG,
    SAMPLE_CLAIM,
    KeywordRule,
)

REQUIRED_KEYS = [
    "SERPER_API_KEY",
]

def check_api_keys_on_startup():
    """Check for required API keys on startup."""
    settings = get_settings()
    missing_keys = [key_name for key_name in REQUIRED_KEYS if not getattr(settings, key_name, None)]

    if missing_keys:
        logger.warning(f"Missing API keys: {', '.join(missing_keys)}. /api/search will return an error.")
    else:
        logger.info("All required API keys are configured.")

__all__ = [
    "logger",
    "Settings",
    "get_settings",
    "check_api_keys_on_startup",
    "resolve_log_level",
    "ANALYZER_CONFIG",
    "SUMMARY_TEMPLATES",
    "SEARCH_CONFIG",
    "SAMPLE_CLAIM",
    "KeywordRule",
]
