"""GitHub workflow component: a named pipeline definition with triggers and jobs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from repofacets.core.component import Capability, Component, component

if TYPE_CHECKING:
    from repofacets.github.github import GitHub

WORKFLOW: Capability[GithubWorkflow] = Capability("github.workflow")


@component(provides=(WORKFLOW,))
class GithubWorkflow(Component):
    """A workflow definition. Names are unique by convention only."""

    def __init__(self, github: GitHub, name: str) -> None:
        super().__init__(github.project)
        if not name:
            raise ValueError("Workflow name must not be empty")
        self.github = github
        self.name = name
        self._triggers: dict[str, Any] = {}
        self._jobs: dict[str, dict[str, Any]] = {}

    def on(self, **triggers: Any) -> None:
        """Add events that start this workflow, e.g. push={"branches": ["main"]}."""
        self._triggers.update(triggers)

    @property
    def triggers(self) -> dict[str, Any]:
        return dict(self._triggers)

    def add_job(self, job_id: str, job: Mapping[str, Any]) -> None:
        """Add a job to the workflow.

        Raises:
            ValueError: If a job with this id already exists.
        """
        if job_id in self._jobs:
            raise ValueError(f"Workflow {self.name!r} already has a job named {job_id!r}")
        self._jobs[job_id] = dict(job)

    def add_jobs(self, jobs: Mapping[str, Mapping[str, Any]]) -> None:
        for job_id, job in jobs.items():
            self.add_job(job_id, job)

    @property
    def jobs(self) -> dict[str, dict[str, Any]]:
        return dict(self._jobs)

    def __repr__(self) -> str:
        return f"GithubWorkflow(name={self.name!r}, jobs={list(self._jobs)})"
