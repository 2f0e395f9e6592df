"""
Configuration settings with validation
"""

import os
import re
from dataclasses import dataclass
from typing import List, Optional
from dotenv import load_dotenv

from localetree.services.classifier import DEFAULT_PLACEHOLDER_PATTERN
from localetree.utils.validators import InputValidator

# Load environment variables
load_dotenv()


@dataclass
class LocaleSettings:
    """Locale file layout"""
    locales_dir: str = 'src/locales'
    reference_language: str = 'en'
    target_languages: List[str] = None
    indent: int = 2

    def __post_init__(self):
        if not self.locales_dir:
            raise ValueError("Locales directory is required")

        if self.target_languages is None:
            # Every locale file in the directory except the reference
            self.target_languages = []

        for lang in [self.reference_language] + list(self.target_languages):
            ok, error = InputValidator.validate_language_code(lang)
            if not ok:
                raise ValueError(error)

        if self.reference_language in self.target_languages:
            raise ValueError(f"Reference language '{self.reference_language}' cannot also be a target")

        ok, error = InputValidator.validate_indent(self.indent)
        if not ok:
            raise ValueError(error)


@dataclass
class ClassifierSettings:
    """Untranslated-leaf detection"""
    intentional_matches_file: Optional[str] = None
    placeholder_pattern: str = DEFAULT_PLACEHOLDER_PATTERN

    def __post_init__(self):
        try:
            re.compile(self.placeholder_pattern)
        except re.error as e:
            raise ValueError(f"Invalid placeholder pattern {self.placeholder_pattern!r}: {e}")


@dataclass
class LogSettings:
    """Logging configuration"""
    debug_mode: bool = False
    log_level: str = 'INFO'

    def __post_init__(self):
        # Validate log level
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")

        self.log_level = 'DEBUG' if self.debug_mode else self.log_level.upper()


@dataclass
class Settings:
    """Main configuration settings"""
    locales: LocaleSettings
    classifier: ClassifierSettings
    logging: LogSettings

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables"""
        targets_str = os.getenv('TARGET_LANGUAGES', '')
        target_languages = [x.strip() for x in targets_str.split(',') if x.strip()]

        indent_str = os.getenv('LOCALE_INDENT', '2')
        try:
            indent = int(indent_str)
        except ValueError:
            raise ValueError(f"Invalid LOCALE_INDENT value: {indent_str!r}. Use an integer.")

        return cls(
            locales=LocaleSettings(
                locales_dir=os.getenv('LOCALES_DIR', 'src/locales'),
                reference_language=os.getenv('REFERENCE_LANGUAGE', 'en'),
                target_languages=target_languages,
                indent=indent
            ),
            classifier=ClassifierSettings(
                intentional_matches_file=os.getenv('INTENTIONAL_MATCHES_FILE') or None,
                placeholder_pattern=os.getenv('PLACEHOLDER_PATTERN', DEFAULT_PLACEHOLDER_PATTERN)
            ),
            logging=LogSettings(
                debug_mode=os.getenv('DEBUG', 'false').lower() == 'true',
                log_level=os.getenv('LOG_LEVEL', 'INFO')
            )
        )
