"""Tests for capability-based discovery."""

from functools import cmp_to_key

from hypothesis import given
from hypothesis import strategies as st

from repofacets import Capability, Component, Project, component, find_all, find_singleton, register

NAMED = Capability("test.named")
OTHER = Capability("test.other")


@component(provides=(NAMED,))
class Named(Component):
    def __init__(self, project, name: str) -> None:
        super().__init__(project)
        self.name = name


@component(provides=(OTHER,))
class Other(Component):
    pass


def _project_with(*names: str) -> tuple[Project, list[Named]]:
    project = Project()
    named = [Named(project, n) for n in names]
    register(project, Other(project), *named)
    return project, named


def test_find_singleton_returns_first_match():
    project, named = _project_with("x", "y")

    assert find_singleton(project, NAMED) is named[0]


def test_find_singleton_absent_is_none():
    """A miss is a normal outcome, not an error."""
    project = Project()
    register(project, Other(project))

    assert find_singleton(project, NAMED) is None


def test_find_all_default_is_registration_order():
    project, named = _project_with("b", "a", "c")

    assert find_all(project, NAMED) == named


def test_find_all_with_key():
    project, _ = _project_with("b", "a", "c")

    result = find_all(project, NAMED, key=lambda n: n.name)

    assert [n.name for n in result] == ["a", "b", "c"]


def test_find_all_with_comparator():
    project, _ = _project_with("b", "a", "c")

    def descending(left, right):
        return (left.name < right.name) - (left.name > right.name)

    result = find_all(project, NAMED, key=cmp_to_key(descending))

    assert [n.name for n in result] == ["c", "b", "a"]


def test_find_all_sees_later_registrations():
    """Discovery re-reads the project on each call, nothing is cached."""
    project, _ = _project_with("a")
    assert len(find_all(project, NAMED)) == 1

    register(project, Named(project, "b"))

    assert len(find_all(project, NAMED)) == 2


def test_find_all_empty_project():
    assert find_all(Project(), NAMED) == []


@given(names=st.lists(st.text(alphabet="abcxyz", min_size=1, max_size=4), max_size=12))
def test_sorted_discovery_is_stable(names):
    """PROPERTY: Sorting by key is stable, equal keys keep registration order."""
    project, named = _project_with(*names)

    result = find_all(project, NAMED, key=lambda n: n.name)

    assert result == sorted(named, key=lambda n: n.name)
    assert sorted(result, key=id) == sorted(named, key=id)
