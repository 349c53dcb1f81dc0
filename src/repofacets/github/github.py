"""GitHub: the component that owns and wires the GitHub facets of a project.

Usage:
    project = Project("my-lib")
    github = GitHub(project, GitHubOptions(mergify=False))

    build = github.add_workflow("build")
    github.add_dependabot()

    assert GitHub.of(project) is github
    assert github.try_find_workflow("build") is build

Construction is atomic: the aggregator and every child it creates while
constructing are committed to the project only once the constructor
finishes. A failure at any point leaves the project unchanged. Until then
GitHub.of(project) returns None; children that need the aggregator get it
passed in, and github.workflows already includes buffered workflows.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar, cast

from repofacets.core.component import Capability, Component, component, register
from repofacets.core.query import find_all, find_singleton
from repofacets.github.credentials import GithubCredentials, resolve_credentials
from repofacets.github.dependabot import Dependabot
from repofacets.github.mergify import Mergify
from repofacets.github.models import DependabotOptions, GitHubOptions
from repofacets.github.pr_template import PullRequestTemplate
from repofacets.github.pull_request_lint import PullRequestLint
from repofacets.github.workflows import WORKFLOW, GithubWorkflow

if TYPE_CHECKING:
    from repofacets.project.protocol import ComponentContainer

logger = logging.getLogger(__name__)

GITHUB: Capability[GitHub] = Capability("github")

C = TypeVar("C", bound=Component)


def _collation_key(workflow: GithubWorkflow) -> tuple[str, str]:
    # Case-insensitive first, lowercase before uppercase on ties
    return workflow.name.casefold(), workflow.name.swapcase()


@component(provides=(GITHUB,))
class GitHub(Component):
    """GitHub facet aggregator.

    Attributes:
        mergify: Mergify configuration, None if Mergify was disabled.
        workflows_enabled: Whether consumers should materialize workflows.
        projen_credentials: How workflows authenticate to the GitHub API.
    """

    @staticmethod
    def of(project: ComponentContainer) -> GitHub | None:
        """Return the GitHub component of a project, None if it has none.

        Returns None while the GitHub constructor is still running.
        """
        return find_singleton(project, GITHUB)

    def __init__(self, project: ComponentContainer, options: GitHubOptions | None = None) -> None:
        super().__init__(project)
        options = options or GitHubOptions()
        # Children created before the commit below are held here
        self._pending: list[Component] | None = [self]

        self.workflows_enabled = options.workflows
        self.projen_credentials: GithubCredentials = resolve_credentials(
            options.projen_credentials, options.projen_token_secret
        )

        self.mergify: Mergify | None = None
        if options.mergify:
            self.mergify = self._attach(Mergify(self, options.mergify_options))

        if options.pull_request_lint:
            self._attach(PullRequestLint(self, options.pull_request_lint_options))

        pending, self._pending = self._pending, None
        register(project, *pending)
        logger.info(
            "GitHub facets registered: %s",
            ", ".join(type(c).__name__ for c in pending),
        )

    def _attach(self, child: C) -> C:
        if self._pending is not None:
            self._pending.append(child)
        else:
            register(self.project, child)
        return child

    @property
    def workflows(self) -> list[GithubWorkflow]:
        """All workflows on the project, sorted case-insensitively by name.

        During construction this includes workflows not yet committed.
        """
        found = find_all(self.project, WORKFLOW)
        if self._pending is not None:
            found.extend(
                cast(GithubWorkflow, c) for c in self._pending if c.has_capability(WORKFLOW)
            )
        found.sort(key=_collation_key)
        return found

    def add_workflow(self, name: str) -> GithubWorkflow:
        """Add a workflow to the project.

        Workflow names are not checked for uniqueness.

        Args:
            name: Name of the workflow.

        Returns:
            The new workflow.
        """
        return self._attach(GithubWorkflow(self, name))

    def add_pull_request_template(self, *lines: str) -> PullRequestTemplate:
        """Add a pull request template made of the given lines."""
        return self._attach(PullRequestTemplate(self, lines))

    def add_dependabot(self, options: DependabotOptions | None = None) -> Dependabot:
        return self._attach(Dependabot(self, options))

    def try_find_workflow(self, name: str) -> GithubWorkflow | None:
        """Find a workflow by name. Returns None if the workflow cannot be found.

        Args:
            name: The name of the workflow.
        """
        return next((w for w in self.workflows if w.name == name), None)

    find_workflow = try_find_workflow
