"""Pull request template component."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from repofacets.core.component import Capability, Component, component

if TYPE_CHECKING:
    from repofacets.github.github import GitHub

PULL_REQUEST_TEMPLATE: Capability[PullRequestTemplate] = Capability(
    "github.pull-request-template"
)


@component(provides=(PULL_REQUEST_TEMPLATE,))
class PullRequestTemplate(Component):
    """Template text shown when a pull request is opened.

    Lines are kept verbatim and in order.
    """

    def __init__(self, github: GitHub, lines: Iterable[str] = ()) -> None:
        super().__init__(github.project)
        self.github = github
        self._lines: tuple[str, ...] = tuple(lines)
        for line in self._lines:
            if not isinstance(line, str):
                raise TypeError(f"Template lines must be str, got {type(line).__name__}")

    @property
    def lines(self) -> list[str]:
        return list(self._lines)
