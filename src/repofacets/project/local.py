"""In-memory project: the default component container."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repofacets.core.component import Component

logger = logging.getLogger(__name__)


class Project:
    """Ordered, append-only list of components.

    Registration order is preserved and only carries provenance. Components
    are compared by identity, so two equal facets are still distinct entries.
    """

    def __init__(self, name: str = "project") -> None:
        self.name = name
        self._components: list[Component] = []

    @property
    def components(self) -> tuple[Component, ...]:
        """Snapshot of registered components, safe to iterate while adding."""
        return tuple(self._components)

    def add_component(self, component: Component) -> None:
        """Append a component.

        Raises:
            ValueError: If this exact instance is already registered.
        """
        if component in self:
            raise ValueError(f"{type(component).__name__} is already registered on {self.name}")
        self._components.append(component)
        logger.debug(
            "Added %s", type(component).__qualname__, extra={"project": self.name}
        )

    def __contains__(self, component: object) -> bool:
        return any(c is component for c in self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, components={len(self._components)})"
