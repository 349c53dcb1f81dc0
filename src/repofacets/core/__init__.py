"""Core functionalities: component primitives and capability discovery.

Architecture Note:
    core/ contains the generic registration and discovery building blocks.
    It knows nothing about GitHub; facets in github/ are built on top of it.
    For the component container, see project/.
"""

from repofacets.core.component import (
    Capability,
    Component,
    ComponentRegistry,
    ComponentTypeMeta,
    component,
    get_registry,
    register,
)
from repofacets.core.query import find_all, find_singleton

__all__ = [
    # Component
    "Capability",
    "Component",
    "ComponentTypeMeta",
    "ComponentRegistry",
    "component",
    "get_registry",
    "register",
    # Query
    "find_singleton",
    "find_all",
]
