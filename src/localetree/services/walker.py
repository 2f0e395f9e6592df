"""
Lockstep walk over a reference tree and a target tree
"""

import logging
from typing import Iterator, List, Mapping, Optional, Tuple, Union

from localetree.models.report import WalkEntry
from localetree.models.tree import Leaf, MISSING, Node, TreeItem, as_tree
from localetree.utils.key_path import child_path

logger = logging.getLogger(__name__)

TreeLike = Union[Node, Mapping, None]


class TreeWalker:
    """
    Walk every leaf reachable from the reference tree.

    Iterating yields one ``WalkEntry(key_path, reference_value, target_value)``
    per reference leaf, in reference order, with the raw keys in ``segments``.
    ``target_value`` is ``MISSING`` when the target has nothing at that path.
    The walker holds no iteration state, so iterating it again produces the
    same sequence.
    """

    def __init__(self, reference: TreeLike, target: TreeLike = None):
        self.reference = as_tree(reference)
        self.target = as_tree(target)

    def __iter__(self) -> Iterator[WalkEntry]:
        return self._walk(self.reference, self.target, '', ())

    def _walk(self, reference: Node, target: Optional[Node], prefix: str,
              parents: Tuple[str, ...]) -> Iterator[WalkEntry]:
        for key, ref_child in reference.items():
            path = child_path(prefix, key)
            segments = parents + (key,)
            target_child = target.get(key, MISSING) if target is not None else MISSING

            if isinstance(ref_child, Node):
                # a stray leaf in the target counts as an empty subtree
                sub_target = target_child if isinstance(target_child, Node) else None
                yield from self._walk(ref_child, sub_target, path, segments)
            elif isinstance(target_child, Node):
                yield WalkEntry(path, ref_child.value, target_child.to_plain(),
                                type_mismatch=True, segments=segments)
            elif isinstance(target_child, Leaf):
                yield WalkEntry(path, ref_child.value, target_child.value, segments=segments)
            else:
                yield WalkEntry(path, ref_child.value, MISSING, segments=segments)

    def extra_keys(self) -> List[str]:
        """Target leaves that have no counterpart in the reference"""
        return list(iter_extra_keys(self.reference, self.target))

    def type_mismatches(self) -> List[str]:
        """Paths where one tree holds an object and the other a leaf"""
        return list(iter_type_mismatches(self.reference, self.target))


def _iter_leaf_paths(item: TreeItem, path: str) -> Iterator[str]:
    if isinstance(item, Node):
        for key, child in item.items():
            yield from _iter_leaf_paths(child, child_path(path, key))
    else:
        yield path


def iter_extra_keys(reference: Node, target: Node, prefix: str = '') -> Iterator[str]:
    """Yield key paths of target leaves absent from the reference"""
    for key, target_child in target.items():
        path = child_path(prefix, key)
        ref_child = reference.get(key)
        if ref_child is None:
            yield from _iter_leaf_paths(target_child, path)
        elif isinstance(ref_child, Node) and isinstance(target_child, Node):
            yield from iter_extra_keys(ref_child, target_child, path)


def iter_type_mismatches(reference: Node, target: Node, prefix: str = '') -> Iterator[str]:
    """Yield key paths where the reference and target disagree on leaf vs object"""
    for key, ref_child in reference.items():
        target_child = target.get(key)
        if target_child is None:
            continue
        path = child_path(prefix, key)
        if isinstance(ref_child, Node) != isinstance(target_child, Node):
            logger.debug(f"Shape mismatch at {path}")
            yield path
        elif isinstance(ref_child, Node):
            yield from iter_type_mismatches(ref_child, target_child, path)
