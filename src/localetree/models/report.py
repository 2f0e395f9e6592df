"""
Classification and report models
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from localetree.models.patch import MergePatch
from localetree.utils.key_path import nest, split_key_path


class LeafClassification(str, Enum):
    """Translation state of a single leaf"""
    TRANSLATED = 'translated'
    UNTRANSLATED = 'untranslated'
    INTENTIONAL_MATCH = 'intentional_match'


@dataclass(frozen=True)
class WalkEntry:
    """
    One reference leaf paired with the target value at the same path

    ``segments`` holds the raw keys from the root. Keys may contain dots, so
    ``key_path`` is for display and reports; ``keys`` addresses the tree.
    """
    key_path: str
    reference_value: Any
    target_value: Any
    type_mismatch: bool = False
    segments: Tuple[str, ...] = ()

    @property
    def keys(self) -> Tuple[str, ...]:
        return self.segments or tuple(split_key_path(self.key_path))


@dataclass(frozen=True)
class ClassifiedLeaf:
    """Walk entry with its classification"""
    entry: WalkEntry
    classification: LeafClassification

    @property
    def key_path(self) -> str:
        return self.entry.key_path


@dataclass
class TranslationReport:
    """Untranslated leaves of one target tree, grouped by top-level section"""
    language: str = ''
    section_counts: Dict[str, int] = field(default_factory=dict)
    untranslated_entries: List[WalkEntry] = field(default_factory=list)
    translated_count: int = 0
    intentional_count: int = 0
    total_leaves: int = 0
    type_mismatches: List[str] = field(default_factory=list)
    extra_keys: List[str] = field(default_factory=list)

    @property
    def untranslated(self) -> List[Tuple[str, Any]]:
        """``(key_path, reference_value)`` of every untranslated leaf, in walk order"""
        return [(entry.key_path, entry.reference_value) for entry in self.untranslated_entries]

    @property
    def untranslated_count(self) -> int:
        return len(self.untranslated_entries)

    @property
    def progress(self) -> float:
        """Share of reference leaves with a real translation (0.0 - 1.0)"""
        if self.total_leaves == 0:
            return 1.0
        return self.translated_count / self.total_leaves

    @property
    def completion(self) -> float:
        """Like :attr:`progress`, but intentional matches count as done"""
        if self.total_leaves == 0:
            return 1.0
        return (self.translated_count + self.intentional_count) / self.total_leaves

    @property
    def is_complete(self) -> bool:
        return not self.untranslated_entries

    def top_sections(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Sections with the most untranslated leaves; ties keep report order"""
        if limit < 0:
            raise ValueError(f"Section limit must be zero or positive, got {limit}")
        ranked = sorted(self.section_counts.items(), key=lambda item: -item[1])
        return ranked[:limit] if limit else ranked

    def to_flat(self) -> Dict[str, Any]:
        return dict(self.untranslated)

    def to_nested(self) -> Dict[str, Any]:
        return nest((entry.keys, entry.reference_value) for entry in self.untranslated_entries)

    def to_patch(self, fill: Callable[[str, Any], Any]) -> MergePatch:
        """
        Build a fragment patch for every untranslated leaf

        The patch is keyed by raw segments, so keys containing dots land where
        the walk found them.

        Args:
            fill: Called with ``(key_path, reference_value)``, returns the value to write
        """
        return MergePatch.fragment(nest(
            (entry.keys, fill(entry.key_path, entry.reference_value))
            for entry in self.untranslated_entries
        ))
