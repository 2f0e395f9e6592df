"""
Configuration module for localetree
"""

from .settings import Settings, LocaleSettings, ClassifierSettings, LogSettings
from .load_config import load_settings, reload_settings

__all__ = [
    'Settings', 'LocaleSettings', 'ClassifierSettings', 'LogSettings',
    'load_settings', 'reload_settings',
]
