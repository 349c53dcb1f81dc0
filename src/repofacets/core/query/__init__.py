"""Query functionality: capability-based component discovery."""

from repofacets.core.query.operations import find_all, find_singleton

__all__ = [
    "find_singleton",
    "find_all",
]
