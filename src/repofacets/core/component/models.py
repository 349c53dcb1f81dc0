"""Component models: capability tags and metadata.

Capabilities are explicit tags a component class declares. Discovery matches
on these tags instead of the concrete class, so an optional facet can be
located without the caller importing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Capability(Generic[T]):
    """Typed tag naming something a component can do or be.

    The type parameter is the component type discovery returns for this tag.

    Example:
        >>> WORKFLOW: Capability[GithubWorkflow] = Capability("github.workflow")
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ComponentTypeMeta:
    """Metadata for registered component types."""

    type_name: str
    capabilities: frozenset[Capability[Any]]

    def provides(self, capability: Capability[Any]) -> bool:
        """Check whether the type carries the given capability tag."""
        return capability in self.capabilities
