import pytest

from reqdepgraph.dependency_map import DependencyError, DependencyMap, Link

A = "REQ-AB-CDEF-0001"
B = "REQ-AB-CDEF-0002"
C = "REQ-AB-CDEF-0003"


@pytest.fixture
def dep_map():
    result = DependencyMap()
    result.add_requirement(A, 4)
    result.add_requirement(B, 10)
    return result


def test_new_map_is_empty():
    dep_map = DependencyMap()
    assert dep_map.is_empty()
    assert len(dep_map) == 0
    assert dep_map.find(A) is None


def test_add_requirement_is_findable(dep_map):
    assert not dep_map.is_empty()
    assert A in dep_map
    assert C not in dep_map
    found = dep_map.find(A)
    assert found.req_id == A
    assert found.line_number == 4
    assert found.parents == []
    assert found.children == []


def test_iteration_keeps_insertion_order(dep_map):
    dep_map.add_requirement(C, 20)
    assert [r.req_id for r in dep_map] == [A, B, C]
    assert len(dep_map) == 3


def test_duplicate_requirement_rejected(dep_map):
    with pytest.raises(DependencyError, match="already exists in the map"):
        dep_map.add_requirement(A, 99)
    assert dep_map.find(A).line_number == 4


def test_add_parent_and_child(dep_map):
    dep_map.add_parent(B, A, 11)
    dep_map.add_child(A, B, 6)
    dep_map.add_child(A, C, 6)
    assert dep_map.find(B).parents == [Link(A, 11)]
    assert dep_map.find(A).children == [Link(B, 6), Link(C, 6)]
    assert dep_map.find(B).has_parent(A)
    assert not dep_map.find(B).has_child(A)
    assert dep_map.find(A).has_child(C)


def test_link_to_unknown_requirement_rejected(dep_map):
    with pytest.raises(DependencyError, match="not found in map"):
        dep_map.add_parent(C, A, 1)
    with pytest.raises(DependencyError, match="not found in map"):
        dep_map.add_child(C, A, 1)


def test_duplicate_links_rejected(dep_map):
    dep_map.add_parent(B, A, 11)
    dep_map.add_child(A, B, 6)
    with pytest.raises(DependencyError, match="parent_ID"):
        dep_map.add_parent(B, A, 12)
    with pytest.raises(DependencyError, match="child_ID"):
        dep_map.add_child(A, B, 7)
    assert len(dep_map.find(B).parents) == 1
    assert len(dep_map.find(A).children) == 1


def test_describe_lists_links(dep_map):
    dep_map.add_child(A, B, 6)
    text = dep_map.describe()
    assert text.startswith("THIS IS WHAT IS IN THE MAP:\n")
    assert f"reqID: {A} (line 4)\n" in text
    assert f"  Children: {B} (line 6), \n" in text
    assert text.count("  Parents: --\n") == 2
    assert text.endswith("\n\n")


def test_describe_empty_map_is_only_header():
    assert DependencyMap().describe() == "THIS IS WHAT IS IN THE MAP:\n"