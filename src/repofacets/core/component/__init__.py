"""Component functionality: base class, capability tags, registry, and registration."""

from repofacets.core.component.core import (
    Component,
    ComponentRegistry,
    component,
    get_registry,
    register,
)
from repofacets.core.component.models import Capability, ComponentTypeMeta

__all__ = [
    # Models
    "Capability",
    "ComponentTypeMeta",
    # Core
    "Component",
    "component",
    "get_registry",
    "register",
    "ComponentRegistry",
]
