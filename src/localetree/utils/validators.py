"""
Input validation utilities
"""

import math
import re
from typing import Any, Mapping, Tuple

from localetree.errors import UnsupportedPatchValue


class PatchValidator:
    """Validation of values that are about to be written into a locale tree"""

    @staticmethod
    def is_supported_value(value: Any) -> bool:
        """Check that a value is plain JSON data"""
        if value is None or isinstance(value, (str, bool, int)):
            return True
        if isinstance(value, float):
            # NaN/Infinity have no JSON representation
            return math.isfinite(value)
        if isinstance(value, list):
            return all(PatchValidator.is_supported_value(item) for item in value)
        if isinstance(value, Mapping):
            return all(
                isinstance(key, str) and PatchValidator.is_supported_value(item)
                for key, item in value.items()
            )
        return False

    @staticmethod
    def validate_value(key_path: str, value: Any) -> None:
        """
        Validate a single patch value

        Raises:
            UnsupportedPatchValue: if the value (or anything nested in it) is not JSON data
        """
        if not PatchValidator.is_supported_value(value):
            raise UnsupportedPatchValue(key_path, value)


class InputValidator:
    """Command line input validation"""

    _LANGUAGE_RE = re.compile(r'^[a-z]{2,3}([-_][A-Za-z0-9]{2,8})?$')

    @staticmethod
    def validate_language_code(lang: str) -> Tuple[bool, str]:
        """Validate language code (``fr``, ``pt-BR``, ``zh_Hans``)"""
        if not lang or not InputValidator._LANGUAGE_RE.match(lang):
            return False, f"Invalid language code: {lang!r}"

        return True, ""

    @staticmethod
    def validate_indent(indent: int) -> Tuple[bool, str]:
        """Validate JSON indent width"""
        if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0 or indent > 8:
            return False, "Indent must be an integer between 0 and 8"

        return True, ""
