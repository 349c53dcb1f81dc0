"""Typed discovery over a project's components.

Usage:
    github = find_singleton(project, GITHUB)
    workflows = find_all(project, WORKFLOW, key=lambda w: w.name)

Both operations re-read the container on every call and never cache.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

from repofacets.core.component.models import Capability

if TYPE_CHECKING:
    from repofacets.project.protocol import ComponentContainer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find_singleton(container: ComponentContainer, capability: Capability[T]) -> T | None:
    """Find the first component carrying a capability.

    Args:
        container: Project to search.
        capability: Capability tag to match.

    Returns:
        First match in registration order, None if the project has none.
    """
    for comp in container.components:
        if comp.has_capability(capability):
            return cast(T, comp)
    logger.debug("No component provides %s", capability)
    return None


def find_all(
    container: ComponentContainer,
    capability: Capability[T],
    key: Callable[[T], Any] | None = None,
) -> list[T]:
    """Find every component carrying a capability.

    Args:
        container: Project to search.
        capability: Capability tag to match.
        key: Optional sort key. Wrap a two-argument comparator with
            functools.cmp_to_key to order by comparison instead.

    Returns:
        Matches in registration order, or sorted by key (stable) when given.
    """
    matches = [cast(T, c) for c in container.components if c.has_capability(capability)]
    if key is not None:
        matches.sort(key=key)
    return matches
