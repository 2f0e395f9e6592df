"""
Key path helpers

A key path addresses a leaf from the tree root as dot-joined segments,
e.g. ``settings.privacy.title``.
"""

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from localetree.errors import InvalidKeyPath

SEPARATOR = '.'


def split_key_path(key_path: str) -> List[str]:
    """
    Split a dot-joined key path into its segments

    Raises:
        InvalidKeyPath: if the path is not a string, is empty or has an empty segment
    """
    if not isinstance(key_path, str):
        raise InvalidKeyPath(key_path, "key path must be a string")
    if not key_path:
        raise InvalidKeyPath(key_path, "key path is empty")

    segments = key_path.split(SEPARATOR)
    if any(not segment for segment in segments):
        raise InvalidKeyPath(key_path, "key path contains an empty segment")
    return segments


def child_path(prefix: str, key: str) -> str:
    return f"{prefix}{SEPARATOR}{key}" if prefix else key


def flatten(data: Mapping[str, Any], prefix: str = '') -> Dict[str, Any]:
    """Flatten nested mappings into ``{key_path: leaf}``; lists stay leaves"""
    result: Dict[str, Any] = {}
    for key, value in data.items():
        path = child_path(prefix, key)
        if isinstance(value, Mapping):
            result.update(flatten(value, path))
        else:
            result[path] = value
    return result


def set_segments(data: Dict[str, Any], parts: Sequence[str], value: Any) -> None:
    """Set ``value`` under raw keys, replacing any non-mapping on the way with ``{}``"""
    if not parts:
        raise InvalidKeyPath('', "key path is empty")
    current = data
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def nest(items: Iterable[Tuple[Sequence[str], Any]]) -> Dict[str, Any]:
    """Build a nested mapping from ``(segments, value)`` pairs"""
    result: Dict[str, Any] = {}
    for segments, value in items:
        set_segments(result, segments, value)
    return result
