"""
Error taxonomy for locale tree operations
"""

from typing import Any, Optional


class LocaleTreeError(Exception):
    """Base class for all locale tree errors"""


class MissingSourceFile(LocaleTreeError):
    """A reference, target or patch file cannot be located or read"""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Locale file not found: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedTree(LocaleTreeError):
    """Persisted content does not parse into a nested key-value structure"""

    def __init__(self, path: str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Malformed locale tree in {self.path}: {reason}")


class InvalidKeyPath(LocaleTreeError):
    """A key path is empty or contains an empty segment"""

    def __init__(self, key_path: Any, reason: str = "empty key path or segment"):
        self.key_path = key_path
        self.reason = reason
        super().__init__(f"Invalid key path {key_path!r}: {reason}")


class UnsupportedPatchValue(LocaleTreeError):
    """A patch value cannot be stored in a locale tree"""

    def __init__(self, key_path: str, value: Any):
        self.key_path = key_path
        self.value = value
        super().__init__(
            f"Unsupported patch value at {key_path!r}: {type(value).__name__} {value!r}"
        )
