"""Dependabot component: automated dependency update settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repofacets.core.component import Capability, Component, component
from repofacets.github.models import DependabotIgnore, DependabotOptions

if TYPE_CHECKING:
    from repofacets.github.github import GitHub

DEPENDABOT: Capability[Dependabot] = Capability("github.dependabot")


@component(provides=(DEPENDABOT,))
class Dependabot(Component):
    """Dependabot configuration.

    Omitted options fall back to DependabotOptions defaults: daily checks,
    lockfile-only updates, and projen itself ignored.
    """

    def __init__(self, github: GitHub, options: DependabotOptions | None = None) -> None:
        super().__init__(github.project)
        options = options or DependabotOptions()
        self.github = github
        self.schedule_interval = options.schedule_interval
        self.versioning_strategy = options.versioning_strategy
        self.labels: tuple[str, ...] = options.labels
        self.ignores_projen = options.ignore_projen
        self._ignore: list[DependabotIgnore] = []

        if options.ignore_projen:
            self.add_ignore("projen")
        for entry in options.ignore:
            self.add_ignore(entry.dependency_name, *entry.versions)

    def add_ignore(self, dependency_name: str, *versions: str) -> None:
        """Skip updates for a dependency, or only for the given versions of it."""
        self._ignore.append(DependabotIgnore(dependency_name=dependency_name, versions=versions))

    @property
    def ignore(self) -> tuple[DependabotIgnore, ...]:
        return tuple(self._ignore)
