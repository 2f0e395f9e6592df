"""
File-level locale operations

Loads trees once, runs the in-memory engine, and writes results once.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from localetree.config.settings import ClassifierSettings, LocaleSettings
from localetree.models.patch import MergePatch
from localetree.models.report import TranslationReport
from localetree.models.tree import MISSING, Node
from localetree.services.classifier import IntentionalMatchTable, LeafClassifier
from localetree.services.locale_store import LocaleStore, PathLike
from localetree.services.merge_service import MergeEngine, MergeResult
from localetree.services.report_service import build_report
from localetree.services.walker import TreeWalker
from localetree.utils.key_path import nest

logger = logging.getLogger(__name__)

PLACEHOLDER_MODES = ('copy', 'todo', 'key')


def placeholder_value(mode: str, key_path: str, reference_value: Any) -> Any:
    """Value written for a key that is missing from a target locale"""
    if mode == 'todo' and isinstance(reference_value, str):
        return f"TODO: {reference_value}"
    if mode == 'key':
        return key_path
    if mode not in PLACEHOLDER_MODES:
        raise ValueError(f"Unknown placeholder mode: {mode}")
    return reference_value


class LocaleService:
    """Compare, merge, fill and summarize locale files"""

    def __init__(
        self,
        settings: LocaleSettings,
        classifier_settings: Optional[ClassifierSettings] = None,
        store: Optional[LocaleStore] = None,
    ):
        self.settings = settings
        self.classifier_settings = classifier_settings or ClassifierSettings()
        self.store = store or LocaleStore(indent=settings.indent)
        self.engine = MergeEngine()
        self._match_table: Optional[IntentionalMatchTable] = None

    @property
    def locales_dir(self) -> Path:
        return Path(self.settings.locales_dir)

    @property
    def match_table(self) -> IntentionalMatchTable:
        """Intentional match table, read on first use"""
        if self._match_table is None:
            self._match_table = self.store.load_match_table(self.classifier_settings.intentional_matches_file)
        return self._match_table

    def classifier_for(self, language: Optional[str]) -> LeafClassifier:
        return LeafClassifier(
            self.match_table,
            language=language,
            placeholder_pattern=self.classifier_settings.placeholder_pattern,
        )

    def compare(self, reference_path: PathLike, target_path: PathLike,
                language: Optional[str] = None) -> TranslationReport:
        """
        Compare a target locale file against the reference file

        Args:
            reference_path: Source language file
            target_path: File being checked
            language: Target language; defaults to the target file name without extension

        Returns:
            Translation report for the target
        """
        language = language or Path(target_path).stem
        reference = self.store.load_tree(reference_path)
        target = self.store.load_tree(target_path)
        return build_report(reference, target, self.classifier_for(language), language)

    def merge(self, target_path: PathLike, patch_path: PathLike, root: Optional[str] = None,
              shape: str = 'auto', dry_run: bool = False) -> MergeResult:
        """Apply a patch file to a target locale file and write the result back"""
        target = self.store.load_tree(target_path)
        patch = self.store.load_patch(patch_path, root=root, shape=shape)
        return self.apply(target_path, target, patch, dry_run=dry_run)

    def apply(self, target_path: PathLike, target: Node, patch: MergePatch,
              dry_run: bool = False) -> MergeResult:
        result = self.engine.apply_with_details(target, patch)

        if dry_run:
            logger.info(f"Dry run: {len(result.updated)} leaves would change in {target_path}")
        elif result.changed:
            self.store.save_tree(target_path, result.tree)
        else:
            logger.info(f"No changes for {target_path}")
        return result

    def target_languages(self) -> List[str]:
        """Configured target languages, or every locale file except the reference"""
        if self.settings.target_languages:
            return list(self.settings.target_languages)
        return [
            lang for lang in self.store.list_languages(self.locales_dir)
            if lang != self.settings.reference_language
        ]

    def reference_path(self) -> Path:
        return self.store.locale_path(self.locales_dir, self.settings.reference_language)

    def status(self) -> Dict[str, TranslationReport]:
        """Report for every target language, keyed by language code"""
        reference = self.store.load_tree(self.reference_path())
        reports: Dict[str, TranslationReport] = {}
        for language in self.target_languages():
            target = self.store.load_tree(self.store.locale_path(self.locales_dir, language))
            reports[language] = build_report(reference, target, self.classifier_for(language), language)
        return reports

    def fill(self, language: str, placeholder: str = 'todo', dry_run: bool = False) -> MergeResult:
        """Add keys missing from a target locale, using placeholder values"""
        if placeholder not in PLACEHOLDER_MODES:
            raise ValueError(f"Unknown placeholder mode: {placeholder}")

        target_path = self.store.locale_path(self.locales_dir, language)
        reference = self.store.load_tree(self.reference_path())
        target = self.store.load_tree(target_path)

        missing = [entry for entry in TreeWalker(reference, target) if entry.target_value is MISSING]
        logger.info(f"[{language}] {len(missing)} keys missing from {target_path}")
        patch = MergePatch.fragment(nest(
            (entry.keys, placeholder_value(placeholder, entry.key_path, entry.reference_value))
            for entry in missing
        ))
        return self.apply(target_path, target, patch, dry_run=dry_run)
