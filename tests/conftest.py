"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from repofacets import Capability, Component, GitHub, GitHubOptions, Project, component


@pytest.fixture
def project():
    """Fresh, empty Project."""
    return Project("test-project")


@pytest.fixture
def bare_github(project):
    """GitHub without the default children, so the project holds only the aggregator."""
    return GitHub(project, GitHubOptions(mergify=False, pull_request_lint=False))


FIXTURE_TAG: Capability["FixtureFacet"] = Capability("test.fixture-facet")


@component(provides=(FIXTURE_TAG,))
class FixtureFacet(Component):
    def __init__(self, project, label: str = "") -> None:
        super().__init__(project)
        self.label = label


@pytest.fixture
def facet_cls():
    return FixtureFacet


@pytest.fixture
def facet_tag():
    return FIXTURE_TAG
