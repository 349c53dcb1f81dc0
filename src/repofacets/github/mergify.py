"""Mergify component: merge automation rules for pull requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repofacets.core.component import Capability, Component, component
from repofacets.github.models import MergifyOptions, MergifyRule

if TYPE_CHECKING:
    from repofacets.github.github import GitHub

MERGIFY: Capability[Mergify] = Capability("github.mergify")


@component(provides=(MERGIFY,))
class Mergify(Component):
    """Mergify configuration for the repository."""

    def __init__(self, github: GitHub, options: MergifyOptions | None = None) -> None:
        super().__init__(github.project)
        self.github = github
        self._rules: list[MergifyRule] = list((options or MergifyOptions()).rules)

    def add_rule(self, rule: MergifyRule) -> None:
        self._rules.append(rule)

    @property
    def rules(self) -> list[MergifyRule]:
        """Rules in the order they were added."""
        return list(self._rules)
