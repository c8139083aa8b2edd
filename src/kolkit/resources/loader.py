"""Loader that binds installed resources to a game session."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from kolkit.conf import settings
from kolkit.resources.registry import ResourceRegistry

if TYPE_CHECKING:
    from kolkit.resources.base import BaseResource
    from kolkit.session import GameSession

logger = logging.getLogger(__name__)


class ResourceLoader:
    """Loads and manages resource instances.

    The ResourceLoader handles:
    1. Importing resource modules to trigger registration
    2. Instantiating every registered resource against one session
    3. Answering which resources the player owns
    """

    def __init__(self, session: GameSession) -> None:
        """Initialize the resource loader.

        Args:
            session: Game session handed to every resource instance.
        """
        self.session = session
        self._instances: dict[str, BaseResource] = {}

    def load_modules(self) -> None:
        """Import all configured resource modules to trigger registration."""
        installed_resources = settings.INSTALLED_RESOURCES or []
        for module_path in installed_resources:
            try:
                importlib.import_module(module_path)
                logger.debug("Loaded resource module: %s", module_path)
            except ImportError:
                logger.exception("Could not load resource module '%s'", module_path)
                raise

    def instantiate_all(self) -> dict[str, BaseResource]:
        """Create instances of all registered resources.

        Returns:
            Dictionary mapping resource names to their instances.
        """
        self.load_modules()

        all_resources = ResourceRegistry.get_all()
        if not all_resources:
            logger.warning("No resources registered")
            return {}

        for name in sorted(all_resources):
            self._instances[name] = all_resources[name](self.session)
            logger.debug("Instantiated resource: %s", name)

        logger.info("Instantiated %d resources", len(self._instances))
        return self._instances

    def get(self, name: str) -> BaseResource | None:
        """Get a resource instance by name."""
        return self._instances.get(name)

    def owned(self) -> list[str]:
        """Return the names of the resources the player owns, sorted by name."""
        return [name for name, resource in self._instances.items() if resource.have()]
