"""
Unit tests for the tree walker
"""

from localetree.models.tree import MISSING, parse_tree
from localetree.services.walker import TreeWalker


def _triples(walker):
    return [(e.key_path, e.reference_value, e.target_value) for e in walker]


class TestTreeWalker:
    """Test cases for TreeWalker"""

    def test_walks_reference_leaves_in_order(self, reference_tree, french_tree):
        paths = [entry.key_path for entry in TreeWalker(reference_tree, french_tree)]
        assert paths == [
            "common.save", "common.cancel", "common.ok",
            "auth.login.title", "auth.login.button", "auth.register.title",
            "club.share", "club.tags",
            "languages.fr",
        ]

    def test_missing_subtrees_are_absent_not_errors(self):
        triples = _triples(TreeWalker({"a": {"b": "Hello", "c": "World"}}, {}))
        assert triples == [("a.b", "Hello", MISSING), ("a.c", "World", MISSING)]

    def test_target_none_is_empty_tree(self):
        assert _triples(TreeWalker({"x": "OK"}, None)) == [("x", "OK", MISSING)]

    def test_arrays_are_not_descended(self):
        entries = list(TreeWalker({"tags": ["a", "b"]}, {"tags": ["a"]}))
        assert len(entries) == 1
        assert entries[0].reference_value == ["a", "b"]
        assert entries[0].target_value == ["a"]

    def test_object_in_target_is_surfaced_as_is(self):
        entries = list(TreeWalker({"a": "text"}, {"a": {"nested": "x"}}))
        assert entries[0].target_value == {"nested": "x"}
        assert entries[0].type_mismatch

    def test_leaf_in_target_where_reference_has_object(self):
        walker = TreeWalker({"a": {"b": "x"}}, {"a": "stray"})
        assert _triples(walker) == [("a.b", "x", MISSING)]
        assert walker.type_mismatches() == ["a"]

    def test_empty_reference_sections_yield_nothing(self):
        assert list(TreeWalker({"empty": {}}, {"empty": {"x": "y"}})) == []

    def test_walk_is_restartable(self, reference_tree, french_tree):
        walker = TreeWalker(reference_tree, french_tree)
        assert list(walker) == list(walker)

    def test_inputs_are_not_mutated(self, reference_tree, french_tree):
        before = (repr(reference_tree), repr(french_tree))
        list(TreeWalker(reference_tree, french_tree))
        assert (repr(reference_tree), repr(french_tree)) == before

    def test_accepts_parsed_trees(self, reference_tree, french_tree):
        plain = list(TreeWalker(reference_tree, french_tree))
        parsed = list(TreeWalker(parse_tree(reference_tree), parse_tree(french_tree)))
        assert plain == parsed

    def test_extra_keys(self, reference_tree, french_tree):
        walker = TreeWalker(reference_tree, french_tree)
        assert walker.extra_keys() == ["club.legacy"]

    def test_extra_keys_under_new_section(self):
        walker = TreeWalker({"a": "x"}, {"a": "y", "b": {"c": "1", "d": {"e": "2"}}})
        assert walker.extra_keys() == ["b.c", "b.d.e"]

    def test_segments_keep_dots_inside_keys(self):
        entries = list(TreeWalker({"abbr": {"e.g.": "e.g."}}, {"abbr": {"e.g.": "p. ex."}}))
        assert entries[0].key_path == "abbr.e.g."
        assert entries[0].segments == ("abbr", "e.g.")
        assert entries[0].target_value == "p. ex."
