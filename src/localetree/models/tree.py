"""
Locale tree data model

Every node of a parsed locale file is either a ``Leaf`` (string, array or
other JSON scalar) or a ``Node`` (mapping of keys to children). The kind of
each node is decided once, when plain JSON data is parsed.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """Terminal value of a locale tree"""
    value: Any

    def to_plain(self) -> Any:
        return copy.deepcopy(self.value)


@dataclass(frozen=True)
class Node:
    """Object node of a locale tree; children keep insertion order"""
    children: Dict[str, Union['Leaf', 'Node']] = field(default_factory=dict)

    # children is a dict, so nodes compare by value but cannot be hashed
    __hash__ = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.children.get(key, default)

    def items(self) -> Iterator[Tuple[str, Union['Leaf', 'Node']]]:
        return iter(self.children.items())

    def __contains__(self, key: str) -> bool:
        return key in self.children

    def __len__(self) -> int:
        return len(self.children)

    def leaf_count(self) -> int:
        """Number of leaves reachable from this node"""
        return sum(
            child.leaf_count() if isinstance(child, Node) else 1
            for child in self.children.values()
        )

    def to_plain(self) -> Dict[str, Any]:
        """Convert back to plain JSON data"""
        return {key: child.to_plain() for key, child in self.children.items()}


TreeItem = Union[Leaf, Node]


class _Missing:
    """Marker for a key that is absent from the target tree"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def parse_value(value: Any) -> TreeItem:
    """Tag a plain JSON value as ``Node`` (mappings) or ``Leaf`` (everything else)"""
    if isinstance(value, Mapping):
        return parse_tree(value)
    return Leaf(copy.deepcopy(value))


def parse_tree(data: Mapping[str, Any]) -> Node:
    """Parse a plain JSON object into a ``Node``"""
    if not isinstance(data, Mapping):
        raise TypeError(f"Locale tree root must be a mapping, got {type(data).__name__}")
    return Node({str(key): parse_value(value) for key, value in data.items()})


def as_tree(data: Union[Node, Mapping[str, Any], None]) -> Node:
    """Accept a parsed tree, a plain mapping or ``None`` (empty tree)"""
    if data is None:
        return Node()
    if isinstance(data, Node):
        return data
    return parse_tree(data)
