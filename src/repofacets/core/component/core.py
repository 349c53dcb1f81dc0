"""Component base class, type registry, decorator, and registration.

Usage:
    WORKFLOW: Capability[Workflow] = Capability("github.workflow")

    @component(provides=(WORKFLOW,))
    class Workflow(Component):
        def __init__(self, project: Project, name: str) -> None:
            super().__init__(project)
            self.name = name

    workflow = Workflow(project, "build")
    register(project, workflow)

Construction never touches the project. Registration is the explicit second
step, which lets a caller build several components and commit them together.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar, overload

from repofacets.core.component.models import Capability, ComponentTypeMeta

if TYPE_CHECKING:
    from repofacets.project.protocol import ComponentContainer

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)


class Component:
    """A unit of project configuration.

    Holds a non-owning reference to the project it belongs to. The reference
    is set once here and cannot be reassigned.
    """

    __component_meta__: ClassVar[ComponentTypeMeta | None] = None

    def __init__(self, project: ComponentContainer) -> None:
        self._project = project

    @property
    def project(self) -> ComponentContainer:
        """The project this component belongs to."""
        return self._project

    @classmethod
    def component_meta(cls) -> ComponentTypeMeta | None:
        """Metadata attached by @component, None for untagged classes."""
        return cls.__component_meta__

    def has_capability(self, capability: Capability[Any]) -> bool:
        """Check if this component's type declares the capability."""
        meta = type(self).__component_meta__
        return meta is not None and meta.provides(capability)


class ComponentRegistry:
    """Process-local registry of component types and the capabilities they provide.

    Maintains a mapping from type to metadata and the reverse index from
    capability to providing types, in registration order.
    """

    def __init__(self) -> None:
        """Initialize empty component registry."""
        self._by_type: dict[type, ComponentTypeMeta] = {}
        self._by_capability: dict[Capability[Any], list[type]] = {}

    def register(
        self, cls: type, provides: Iterable[Capability[Any]] = ()
    ) -> ComponentTypeMeta:
        """Register a component type and return its metadata.

        Capabilities declared by registered base classes are inherited.

        Args:
            cls: Component class to register.
            provides: Capability tags the class declares.

        Returns:
            Component metadata including type name and capabilities.

        Raises:
            TypeError: If cls does not derive from Component.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        if not (isinstance(cls, type) and issubclass(cls, Component)):
            raise TypeError(
                f"Component {getattr(cls, '__name__', cls)!r} must subclass Component. "
                f"Did you forget to inherit from Component?"
            )

        capabilities: set[Capability[Any]] = set(provides)
        for base in cls.__mro__[1:]:
            inherited = self._by_type.get(base)
            if inherited is not None:
                capabilities |= inherited.capabilities

        meta = ComponentTypeMeta(
            type_name=f"{cls.__module__}.{cls.__qualname__}",
            capabilities=frozenset(capabilities),
        )
        self._by_type[cls] = meta
        for capability in meta.capabilities:
            self._by_capability.setdefault(capability, []).append(cls)
        return meta

    def get_meta(self, cls: type) -> ComponentTypeMeta | None:
        """Get metadata for a registered component type.

        Args:
            cls: Component class to look up.

        Returns:
            Component metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def providers(self, capability: Capability[Any]) -> tuple[type, ...]:
        """Get all registered types declaring a capability.

        Args:
            capability: Capability tag to look up.

        Returns:
            Providing types in registration order, empty if none.
        """
        return tuple(self._by_capability.get(capability, ()))

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered as a component."""
        return cls in self._by_type


# Module-level registry instance
_registry = ComponentRegistry()


def get_registry() -> ComponentRegistry:
    """Access the global component registry.

    Returns:
        The process-local ComponentRegistry instance.
    """
    return _registry


@overload
def component(cls: C) -> C: ...


@overload
def component(
    cls: None = None, *, provides: Iterable[Capability[Any]] = ()
) -> Callable[[C], C]: ...


def component(
    cls: type | None = None, *, provides: Iterable[Capability[Any]] = ()
) -> type | Callable[[type], type]:
    """Register a Component subclass and tag it with capabilities.

    Supports three forms:
        @component                          # bare decorator, no capabilities
        @component()                        # parenthesized, no args
        @component(provides=(WORKFLOW,))    # with capability tags

    Args:
        cls: The class to register, or None if called with arguments.
        provides: Capability tags instances of the class answer to.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class does not subclass Component.
    """
    tags = tuple(provides)

    def decorator(c: type) -> type:
        meta = _registry.register(c, provides=tags)
        c.__component_meta__ = meta  # type: ignore[attr-defined]
        return c

    if cls is None:
        return decorator
    return decorator(cls)


def register(container: ComponentContainer, *components: Component) -> None:
    """Add components to the container they were constructed for.

    Components are added in argument order. Every component is checked
    before any is added, so a bad argument leaves the container unchanged.

    Args:
        container: Project receiving the components.
        *components: Components whose back-reference is container.

    Raises:
        ValueError: If a component belongs to another project or is already
            registered.
    """
    for comp in components:
        if comp.project is not container:
            raise ValueError(
                f"{type(comp).__name__} belongs to a different project and cannot be "
                f"registered here"
            )
        if comp in container:
            raise ValueError(f"{type(comp).__name__} is already registered")

    for comp in components:
        container.add_component(comp)
        logger.debug("Registered %s", type(comp).__qualname__)
