"""
Data models for localetree
"""

from .tree import Leaf, Node, TreeItem, MISSING, parse_tree, parse_value, as_tree
from .patch import MergePatch, PatchShape
from .report import LeafClassification, WalkEntry, ClassifiedLeaf, TranslationReport

__all__ = [
    'Leaf', 'Node', 'TreeItem', 'MISSING', 'parse_tree', 'parse_value', 'as_tree',
    'MergePatch', 'PatchShape',
    'LeafClassification', 'WalkEntry', 'ClassifiedLeaf', 'TranslationReport',
]
