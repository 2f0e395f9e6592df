"""
Leaf classification

A leaf is untranslated when the target value is missing, blank or identical
to the reference. Identical values are forgiven (``IntentionalMatch``) when
the reference contains an allow-listed term or an interpolation placeholder.
Arrays are opaque values that only need to be present: an identical array
is an intentional match as well.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from localetree.models.report import ClassifiedLeaf, LeafClassification, WalkEntry
from localetree.models.tree import MISSING

logger = logging.getLogger(__name__)

ALL_LANGUAGES = '*'
DEFAULT_PLACEHOLDER_PATTERN = r'\{\{.*?\}\}'


@dataclass
class IntentionalMatchTable:
    """
    Terms expected to stay identical across languages, keyed by target language.

    Terms under ``*`` apply to every language. A regional code such as
    ``pt-BR`` also picks up the terms of its base language ``pt``.
    """
    terms: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'IntentionalMatchTable':
        """Build a table from decoded JSON, e.g. ``{"*": ["OK"], "de": ["Status"]}``"""
        if not isinstance(data, Mapping):
            raise ValueError("Intentional match table must be a JSON object")

        table = cls()
        for language, terms in data.items():
            if not isinstance(terms, list) or not all(isinstance(t, str) for t in terms):
                raise ValueError(f"Intentional match terms for '{language}' must be a list of strings")
            table.add(language, *terms)
        return table

    def add(self, language: str, *terms: str) -> None:
        bucket = self.terms.setdefault(language, [])
        for term in terms:
            if not term:
                # an empty term would be a substring of everything
                logger.warning(f"Ignoring empty intentional match term for '{language}'")
                continue
            if term not in bucket:
                bucket.append(term)

    def terms_for(self, language: Optional[str] = None) -> List[str]:
        languages = [ALL_LANGUAGES]
        if language:
            base = re.split(r'[-_]', language, maxsplit=1)[0]
            if base != language:
                languages.append(base)
            languages.append(language)

        result: List[str] = []
        for lang in languages:
            for term in self.terms.get(lang, []):
                if term not in result:
                    result.append(term)
        return result


def _is_blank(value: Any) -> bool:
    return value is MISSING or value is None or value == ''


def _same_value(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


class LeafClassifier:
    """Classify walk entries for one target language"""

    def __init__(
        self,
        match_table: Optional[IntentionalMatchTable] = None,
        language: Optional[str] = None,
        placeholder_pattern: str = DEFAULT_PLACEHOLDER_PATTERN,
    ):
        self.language = language
        self.terms = (match_table or IntentionalMatchTable()).terms_for(language)
        self.placeholder_re = re.compile(placeholder_pattern)

    def is_intentional_match(self, reference_value: Any) -> bool:
        """Check whether an identical target value is expected for this reference value"""
        if not isinstance(reference_value, str):
            return reference_value in self.terms
        if self.placeholder_re.search(reference_value):
            return True
        return any(term in reference_value for term in self.terms)

    def classify(self, entry: WalkEntry) -> LeafClassification:
        target_value = entry.target_value

        if _is_blank(target_value):
            return LeafClassification.UNTRANSLATED

        if _same_value(target_value, entry.reference_value):
            if isinstance(target_value, list) or self.is_intentional_match(entry.reference_value):
                return LeafClassification.INTENTIONAL_MATCH
            return LeafClassification.UNTRANSLATED

        return LeafClassification.TRANSLATED

    def classify_all(self, entries: Iterable[WalkEntry]) -> Iterator[ClassifiedLeaf]:
        for entry in entries:
            yield ClassifiedLeaf(entry, self.classify(entry))
