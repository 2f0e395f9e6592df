"""
Process-wide settings cache for the command line
"""

import logging
from typing import Optional
from .settings import Settings

logger = logging.getLogger(__name__)

_settings: Optional[Settings] = None


def load_settings() -> Settings:
    """
    Read settings from the environment on first call and reuse them afterwards

    Raises:
        ValueError: if a variable holds an invalid value; nothing is cached then
    """
    global _settings

    if _settings is None:
        settings = Settings.from_env()
        logger.debug(
            f"Settings: locales in {settings.locales.locales_dir}, "
            f"reference '{settings.locales.reference_language}', "
            f"{len(settings.locales.target_languages)} configured targets"
        )
        _settings = settings

    return _settings


def reload_settings() -> Settings:
    """Forget cached settings, e.g. after the environment changed"""
    global _settings
    _settings = None
    return load_settings()
