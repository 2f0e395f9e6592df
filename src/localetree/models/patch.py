"""
Merge patch model
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from localetree.utils.key_path import child_path, flatten


class PatchShape(str, Enum):
    """How a patch addresses the target tree"""
    FLAT = 'flat'
    FRAGMENT = 'fragment'


@dataclass(frozen=True)
class MergePatch:
    """
    Replacement values for a target tree

    A flat patch maps dot-joined key paths to values. A fragment patch is a
    nested tree deep-merged at ``root`` (the tree root when ``root`` is None).
    """
    shape: PatchShape
    entries: Dict[str, Any] = field(default_factory=dict)
    root: Optional[str] = None

    __hash__ = None

    @classmethod
    def flat(cls, entries: Mapping[str, Any]) -> 'MergePatch':
        return cls(PatchShape.FLAT, dict(entries))

    @classmethod
    def fragment(cls, fragment: Mapping[str, Any], root: Optional[str] = None) -> 'MergePatch':
        return cls(PatchShape.FRAGMENT, dict(fragment), root or None)

    @classmethod
    def from_plain(cls, data: Mapping[str, Any], root: Optional[str] = None,
                   shape: str = 'auto') -> 'MergePatch':
        """
        Build a patch from a decoded patch file

        Args:
            data: Decoded JSON object
            root: Key path to merge a fragment at
            shape: ``flat``, ``nested`` or ``auto`` (nested when any top-level value is an object)
        """
        if shape == 'auto':
            nested = root is not None or any(isinstance(v, Mapping) for v in data.values())
            shape = 'nested' if nested else 'flat'

        if shape == 'flat':
            return cls.flat(data)
        if shape == 'nested':
            return cls.fragment(data, root)
        raise ValueError(f"Unknown patch shape: {shape}")

    def key_paths(self) -> List[str]:
        """Leaf key paths this patch writes, in patch order"""
        if self.shape == PatchShape.FLAT:
            return list(self.entries)
        return [child_path(self.root or '', key) for key in flatten(self.entries)]

    def __len__(self) -> int:
        return len(self.key_paths())
