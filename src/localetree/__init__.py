"""
localetree: compare locale JSON trees against a reference language and merge translation patches
"""

from .errors import (
    LocaleTreeError, MissingSourceFile, MalformedTree, InvalidKeyPath, UnsupportedPatchValue,
)
from .models import (
    Leaf, Node, MISSING, parse_tree, MergePatch, LeafClassification, TranslationReport,
)
from .services import (
    TreeWalker, LeafClassifier, IntentionalMatchTable, build_report, MergeEngine, apply_patch,
    merge_trees, LocaleStore,
)

__version__ = '0.1.0'

__all__ = [
    'LocaleTreeError', 'MissingSourceFile', 'MalformedTree', 'InvalidKeyPath', 'UnsupportedPatchValue',
    'Leaf', 'Node', 'MISSING', 'parse_tree', 'MergePatch', 'LeafClassification', 'TranslationReport',
    'TreeWalker', 'LeafClassifier', 'IntentionalMatchTable', 'build_report', 'MergeEngine',
    'apply_patch', 'merge_trees', 'LocaleStore',
]
