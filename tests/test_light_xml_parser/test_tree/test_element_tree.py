"""Tests for searching and building an XMLElementTree."""

from typing import List, Tuple

import pytest

from light_xml_parser.shared import InvalidArgumentError
from light_xml_parser.tree import ElementNode, XMLElementTree

TAG1 = "tag1"
TAG2 = "tag2"


@pytest.fixture
def three_children() -> Tuple[ElementNode, List[ElementNode]]:
    """Root with three same-tagged children."""
    root = ElementNode("root", "root data")
    children = [
        ElementNode(TAG1, "child1 data"),
        ElementNode(TAG1, "child2 data"),
        ElementNode(TAG1, "child3 data"),
    ]
    root.add_children(children)
    return root, children


class TestXMLElementTreeConstruction:
    """Test tree construction guards."""

    def test_root_is_exposed(self) -> None:
        """Test the root node is returned as-is."""
        root = ElementNode("root")

        assert XMLElementTree(root).root is root

    def test_none_root_raises_invalid_argument(self) -> None:
        """Test that a tree requires a root."""
        with pytest.raises(InvalidArgumentError, match="Root cannot be None"):
            XMLElementTree(None)  # type: ignore[arg-type]

    def test_non_node_root_raises_type_error(self) -> None:
        """Test that the root must be an ElementNode."""
        with pytest.raises(TypeError, match="Root must be an ElementNode instance"):
            XMLElementTree("root")  # type: ignore[arg-type]


class TestFindByTag:
    """Test breadth-first tag search."""

    def test_returns_matching_children_in_order(self, three_children) -> None:
        """Test search for the children's tag returns exactly those children."""
        root, children = three_children
        tree = XMLElementTree(root)

        assert tree.find_by_tag(TAG1) == children
        assert all(
            found is expected for found, expected in zip(tree.find_by_tag(TAG1), children)
        )

    def test_absent_tag_returns_empty_list(self, three_children) -> None:
        """Test search for an absent tag."""
        root, _ = three_children

        assert XMLElementTree(root).find_by_tag("inexistent") == []

    def test_matched_nodes_are_not_descended(self, three_children) -> None:
        """Test children matches hide same-tagged grandchildren."""
        root, children = three_children
        children[0].add_child(ElementNode(TAG1, "grandchild"))

        result = XMLElementTree(root).find_by_tag(TAG1)

        assert len(result) == 3
        assert all(found is expected for found, expected in zip(result, children))

    def test_grandchildren_found_in_level_order(self, three_children) -> None:
        """Test search for a tag present only below the children."""
        root, (child1, child2, _) = three_children
        name1 = ElementNode(TAG2, "name1")
        name2 = ElementNode(TAG2, "name2")
        name1.add_child(name2)
        child1.add_child(name1)
        child1.add_child(name2)
        child2.add_child(name2)

        result = XMLElementTree(root).find_by_tag(TAG2)

        assert result == [name1, name2, name2]
        assert result[0] is name1
        assert result[1] is name2 and result[2] is name2

    def test_matching_root_short_circuits(self) -> None:
        """Test that a matching root is the only result."""
        root = ElementNode("a", "", [ElementNode("a"), ElementNode("a")])

        result = XMLElementTree(root).find_by_tag("a")

        assert len(result) == 1
        assert result[0] is root

    def test_breadth_first_across_branches(self) -> None:
        """Test shallower matches come before deeper ones from earlier branches."""
        deep = ElementNode("x", "deep")
        shallow = ElementNode("x", "shallow")
        root = ElementNode("r", "", [
            ElementNode("a", "", [ElementNode("b", "", [deep])]),
            ElementNode("c", "", [shallow]),
        ])

        result = XMLElementTree(root).find_by_tag("x")

        assert [node.data for node in result] == ["shallow", "deep"]

    def test_none_tag_raises_invalid_argument(self, three_children) -> None:
        """Test that the query tag is required."""
        root, _ = three_children

        with pytest.raises(InvalidArgumentError, match="Tag cannot be None"):
            XMLElementTree(root).find_by_tag(None)  # type: ignore[arg-type]


class TestAppendChild:
    """Test tree mutation through append_child."""

    def test_rendering_before_and_after_append(self, three_children) -> None:
        """Test appended child shows up in the ancestors' rendering."""
        root, (_, child2, _) = three_children
        tree = XMLElementTree(root)

        assert str(tree) == (
            f"<root>root data<{TAG1}>child1 data</{TAG1}><{TAG1}>child2 data</{TAG1}>"
            f"<{TAG1}>child3 data</{TAG1}></root>"
        )

        grandchild = ElementNode(TAG2, "grandchild data")
        assert tree.append_child(child2, grandchild) is grandchild

        assert str(tree) == (
            f"<root>root data<{TAG1}>child1 data</{TAG1}><{TAG1}>child2 data"
            f"<{TAG2}>grandchild data</{TAG2}></{TAG1}><{TAG1}>child3 data</{TAG1}></root>"
        )

    def test_append_goes_to_end(self) -> None:
        """Test that append_child adds after existing children."""
        root = ElementNode("a", "", [ElementNode("b")])
        tree = XMLElementTree(root)

        tree.append_child(root, ElementNode("c"))

        assert str(tree) == "<a><b></b><c></c></a>"

    @pytest.mark.parametrize(
        "use_parent, use_child, message",
        [
            (False, True, "Parent cannot be None"),
            (True, False, "Child cannot be None"),
            (False, False, "Parent cannot be None"),
        ],
    )
    def test_none_arguments_leave_tree_unchanged(
        self, three_children, use_parent, use_child, message
    ) -> None:
        """Test append guards and that a failed append mutates nothing."""
        root, (child1, _, _) = three_children
        tree = XMLElementTree(root)
        before = str(tree)

        parent = child1 if use_parent else None
        child = ElementNode(TAG2) if use_child else None
        with pytest.raises(InvalidArgumentError, match=message):
            tree.append_child(parent, child)  # type: ignore[arg-type]

        assert str(tree) == before


class TestXMLElementTreeHelpers:
    """Test equality, statistics and conversions."""

    def test_trees_compare_by_structure(self) -> None:
        """Test two trees with equal roots are equal."""
        left = XMLElementTree(ElementNode("a", "x", [ElementNode("b")]))
        right = XMLElementTree(ElementNode("a", "x", [ElementNode("b")]))

        assert left == right
        assert left != XMLElementTree(ElementNode("a", "x"))

    def test_statistics(self) -> None:
        """Test element count, depth and document-order listing."""
        root = ElementNode("a", "", [
            ElementNode("b", "", [ElementNode("c", "", [ElementNode("d")])]),
            ElementNode("e"),
        ])
        tree = XMLElementTree(root)

        assert tree.element_count == 5
        assert tree.max_depth == 3
        assert [node.tag for node in tree.iter_elements()] == ["a", "b", "c", "d", "e"]

    def test_single_node_statistics(self) -> None:
        """Test statistics of a root-only tree."""
        tree = XMLElementTree(ElementNode("a"))

        assert tree.element_count == 1
        assert tree.max_depth == 0

    def test_to_dict_wraps_root(self) -> None:
        """Test dictionary conversion of the tree."""
        tree = XMLElementTree(ElementNode("a", "x"))

        assert tree.to_dict() == {"root": {"tag": "a", "data": "x", "children": []}}
