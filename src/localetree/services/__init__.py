"""
Services for localetree
"""

from .walker import TreeWalker
from .classifier import LeafClassifier, IntentionalMatchTable
from .report_service import ReportAggregator, build_report
from .merge_service import MergeEngine, MergeResult, apply_patch, merge_trees
from .locale_store import LocaleStore

__all__ = [
    'TreeWalker', 'LeafClassifier', 'IntentionalMatchTable', 'ReportAggregator', 'build_report',
    'MergeEngine', 'MergeResult', 'apply_patch', 'merge_trees', 'LocaleStore',
]
