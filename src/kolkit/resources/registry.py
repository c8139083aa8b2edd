"""Registry for pluggable item resources.

Resources register themselves using the @ResourceRegistry.register
decorator, and the ResourceLoader instantiates whatever is registered
after importing settings.INSTALLED_RESOURCES.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, TypeVar

if TYPE_CHECKING:
    from kolkit.resources.base import BaseResource

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="BaseResource")


class ResourceRegistry:
    """Central registry for all item resources.

    Class Attributes:
        _resources: Dictionary mapping resource names to their classes.
    """

    _resources: ClassVar[dict[str, type[BaseResource]]] = {}

    @classmethod
    def register(cls, resource_class: type[R]) -> type[R]:
        """Register a resource class.

        Used as a decorator on resource classes.

        Args:
            resource_class: The resource class to register.

        Returns:
            The same class, allowing use as a decorator.

        Raises:
            ValueError: If the class doesn't define a 'name' attribute.
        """
        name = getattr(resource_class, "name", None)
        if not name:
            msg = f"Resource {resource_class.__name__} must define a 'name' class attribute"
            raise ValueError(msg)

        if name in cls._resources:
            logger.warning(
                "Resource '%s' is being re-registered (was %s, now %s)",
                name,
                cls._resources[name].__name__,
                resource_class.__name__,
            )

        cls._resources[name] = resource_class
        logger.debug("Registered resource: %s", name)
        return resource_class

    @classmethod
    def get(cls, name: str) -> type[BaseResource] | None:
        """Get a registered resource class by name."""
        return cls._resources.get(name)

    @classmethod
    def get_all(cls) -> dict[str, type[BaseResource]]:
        """Get all registered resources."""
        return cls._resources.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a resource is registered."""
        return name in cls._resources

    @classmethod
    def clear(cls) -> None:
        """Clear the registry (for testing)."""
        cls._resources.clear()
        logger.debug("Resource registry cleared")
