"""Pull request linter: checks pull request titles follow Conventional Commits."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from repofacets.core.component import Capability, Component, component
from repofacets.github.models import PullRequestLintOptions

if TYPE_CHECKING:
    from repofacets.github.github import GitHub
    from repofacets.github.workflows import GithubWorkflow

PULL_REQUEST_LINT: Capability[PullRequestLint] = Capability("github.pull-request-lint")

WORKFLOW_NAME = "pull-request-lint"

_PULL_REQUEST_EVENTS = [
    "labeled",
    "opened",
    "synchronize",
    "reopened",
    "ready_for_review",
    "edited",
]


@component(provides=(PULL_REQUEST_LINT,))
class PullRequestLint(Component):
    """Adds a "pull-request-lint" workflow validating pull request titles.

    The workflow is only added when semantic title checks are enabled.
    """

    def __init__(self, github: GitHub, options: PullRequestLintOptions | None = None) -> None:
        super().__init__(github.project)
        self.github = github
        self.options = options or PullRequestLintOptions()
        self.workflow: GithubWorkflow | None = None

        if self.options.semantic_title:
            self.workflow = github.add_workflow(WORKFLOW_NAME)
            self.workflow.on(pull_request_target={"types": list(_PULL_REQUEST_EVENTS)})
            self.workflow.add_job("validate", self._validate_job())

    def _validate_job(self) -> dict[str, Any]:
        title = self.options.semantic_title_options
        return {
            "name": "Validate PR title",
            "runs-on": ["ubuntu-latest"],
            "permissions": {"pull-requests": "write"},
            "steps": [
                {
                    "uses": "amannn/action-semantic-pull-request@v5",
                    "env": {"GITHUB_TOKEN": "${{ secrets.GITHUB_TOKEN }}"},
                    "with": {
                        "types": "\n".join(title.types),
                        "requireScope": title.require_scope,
                    },
                }
            ],
        }
