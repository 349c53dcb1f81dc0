"""Project containers that components register on."""

from repofacets.project.local import Project
from repofacets.project.protocol import ComponentContainer

__all__ = [
    "ComponentContainer",
    "Project",
]
