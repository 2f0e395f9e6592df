"""
Merge engine: apply translation patches to a target tree

Merging never mutates the trees passed in. Every key path and value in a
patch is validated before the first change is made, so a failing patch leaves
nothing half-applied.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from localetree.errors import InvalidKeyPath
from localetree.models.patch import MergePatch, PatchShape
from localetree.models.tree import Leaf, Node, TreeItem, as_tree, parse_tree, parse_value
from localetree.services.walker import TreeLike
from localetree.utils.key_path import child_path, split_key_path
from localetree.utils.validators import PatchValidator

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Merged tree plus what the merge did to it"""
    tree: Node
    updated: List[str] = field(default_factory=list)
    coerced: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.updated or self.coerced)


class MergeEngine:
    """Apply ``MergePatch`` objects to locale trees"""

    def validate(self, patch: MergePatch) -> None:
        """
        Validate a patch without applying it

        Raises:
            InvalidKeyPath: empty key path or empty segment
            UnsupportedPatchValue: value that is not plain JSON data
        """
        if patch.shape == PatchShape.FLAT:
            for key_path, value in patch.entries.items():
                split_key_path(key_path)
                self._validate_value(key_path, value)
            return

        prefix = ''
        if patch.root is not None:
            split_key_path(patch.root)
            prefix = patch.root
        self._validate_fragment(patch.entries, prefix)

    def _validate_fragment(self, fragment: Mapping[str, Any], prefix: str) -> None:
        for key, value in fragment.items():
            path = child_path(prefix, key)
            if not isinstance(key, str) or not key:
                raise InvalidKeyPath(path, "fragment contains an empty key")
            if isinstance(value, Mapping):
                self._validate_fragment(value, path)
            else:
                PatchValidator.validate_value(path, value)

    def _validate_value(self, key_path: str, value: Any) -> None:
        if isinstance(value, Mapping):
            self._validate_fragment(value, key_path)
        else:
            PatchValidator.validate_value(key_path, value)

    def apply(self, target: TreeLike, patch: MergePatch) -> Node:
        """Return ``target`` with ``patch`` merged in"""
        return self.apply_with_details(target, patch).tree

    def apply_with_details(self, target: TreeLike, patch: MergePatch) -> MergeResult:
        self.validate(patch)

        result = MergeResult(tree=as_tree(target))
        if patch.shape == PatchShape.FLAT:
            for key_path, value in patch.entries.items():
                result.tree = self._set_path(
                    result.tree, split_key_path(key_path), parse_value(value), '', result
                )
        else:
            fragment = parse_tree(patch.entries)
            if patch.root is None:
                result.tree = self._deep_merge(result.tree, fragment, '', result)
            else:
                result.tree = self._set_path(
                    result.tree, split_key_path(patch.root), fragment, '', result
                )

        logger.debug(
            f"Merged {patch.shape.value} patch: {len(result.updated)} leaves updated, "
            f"{len(result.coerced)} nodes coerced"
        )
        return result

    def _set_path(self, node: Node, segments: List[str], item: TreeItem,
                  prefix: str, result: MergeResult) -> Node:
        key, rest = segments[0], segments[1:]
        path = child_path(prefix, key)
        children = dict(node.children)
        existing = children.get(key)

        if rest:
            if isinstance(existing, Leaf):
                self._coerce(path, existing, result)
                existing = None
            children[key] = self._set_path(existing or Node(), rest, item, path, result)
        elif isinstance(item, Node) and isinstance(existing, Node):
            children[key] = self._deep_merge(existing, item, path, result)
        else:
            children[key] = self._replace(existing, item, path, result)

        return Node(children)

    def _deep_merge(self, target: Node, source: Node, prefix: str, result: MergeResult) -> Node:
        children = dict(target.children)
        for key, source_child in source.items():
            path = child_path(prefix, key)
            existing = children.get(key)
            if isinstance(source_child, Node) and isinstance(existing, Node):
                children[key] = self._deep_merge(existing, source_child, path, result)
            else:
                children[key] = self._replace(existing, source_child, path, result)
        return Node(children)

    def _replace(self, existing: Optional[TreeItem], item: TreeItem,
                 path: str, result: MergeResult) -> TreeItem:
        if isinstance(item, Node):
            if isinstance(existing, Leaf):
                self._coerce(path, existing, result)
            # fresh subtree: merge into an empty node to record its leaves
            return self._deep_merge(Node(), item, path, result)

        if isinstance(existing, Node):
            logger.warning(f"Replacing object at '{path}' with a leaf value")
            result.coerced.append(path)
        if not isinstance(existing, Leaf) or existing.value != item.value:
            result.updated.append(path)
        return item

    def _coerce(self, path: str, stray: Leaf, result: MergeResult) -> None:
        logger.warning(f"Discarding leaf {stray.value!r} at '{path}' to make room for an object")
        result.coerced.append(path)


def apply_patch(target: TreeLike, patch: MergePatch) -> Node:
    """Merge ``patch`` into ``target`` and return the new tree"""
    return MergeEngine().apply(target, patch)


def merge_trees(target: TreeLike, source: TreeLike) -> Node:
    """Deep-merge ``source`` into ``target`` at the root; source values win"""
    return MergeEngine().apply(target, MergePatch.fragment(as_tree(source).to_plain()))
