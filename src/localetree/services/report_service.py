"""
Translation report aggregation
"""

import logging
from typing import Iterable, Optional

from localetree.models.report import ClassifiedLeaf, LeafClassification, TranslationReport
from localetree.services.classifier import LeafClassifier
from localetree.services.walker import TreeLike, TreeWalker

logger = logging.getLogger(__name__)


class ReportAggregator:
    """Fold classified leaves into a ``TranslationReport``"""

    def __init__(self, language: str = ''):
        self.language = language

    def aggregate(self, classified: Iterable[ClassifiedLeaf]) -> TranslationReport:
        report = TranslationReport(language=self.language)

        for leaf in classified:
            report.total_leaves += 1

            if leaf.classification == LeafClassification.TRANSLATED:
                report.translated_count += 1
            elif leaf.classification == LeafClassification.INTENTIONAL_MATCH:
                report.intentional_count += 1
            else:
                section = leaf.entry.keys[0]
                report.section_counts[section] = report.section_counts.get(section, 0) + 1
                report.untranslated_entries.append(leaf.entry)

        return report


def build_report(
    reference: TreeLike,
    target: TreeLike,
    classifier: Optional[LeafClassifier] = None,
    language: str = '',
) -> TranslationReport:
    """
    Compare a target tree against the reference tree

    Args:
        reference: Source-of-truth tree
        target: Tree being checked; partial or empty trees are fine
        classifier: Classifier configured for the target language
        language: Label stored on the report

    Returns:
        Report of untranslated leaves grouped by section
    """
    if classifier is None:
        classifier = LeafClassifier(language=language or None)

    walker = TreeWalker(reference, target)
    report = ReportAggregator(language).aggregate(classifier.classify_all(walker))
    report.extra_keys = walker.extra_keys()
    report.type_mismatches = walker.type_mismatches()

    logger.debug(
        f"Report for '{language or 'target'}': {report.untranslated_count} untranslated, "
        f"{report.translated_count} translated, {report.intentional_count} intentional "
        f"of {report.total_leaves} leaves"
    )
    return report
