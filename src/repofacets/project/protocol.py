"""Container protocol for component registries.

Anything that keeps an ordered, append-only list of components can host
facets. Project is the in-memory implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from repofacets.core.component import Component


class ComponentContainer(Protocol):
    """Append-only, ordered component registry."""

    @property
    def components(self) -> tuple[Component, ...]:
        """All components in registration order."""
        ...

    def add_component(self, component: Component) -> None:
        """Append a component. Components are never removed."""
        ...

    def __contains__(self, component: object) -> bool:
        """Check if this exact component instance is registered."""
        ...
