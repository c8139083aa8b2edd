"""Base class for item resources.

A resource wraps one item (or campground fixture) and exposes the helpers a
script needs to use it: ownership checks, counters read from game properties
and the actions that spend them.

Example:
    Creating a custom resource::

        from kolkit.resources.base import BaseResource
        from kolkit.resources.registry import ResourceRegistry

        @ResourceRegistry.register
        class CargoShortsResource(BaseResource):
            name = "cargo_shorts"
            item = "Cargo Cultist Shorts"

            def pockets_left(self) -> int:
                return 666 - len(self.session.get_property("cargoPocketsEmptied").split(","))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from kolkit.session import GameSession


class BaseResource:
    """Base class for all item resources.

    Attributes:
        name: Unique identifier for the resource. Must be defined as a class variable.
        item: Name of the item whose ownership gates the resource.
        session: Game session the resource reads from and acts through.
    """

    # Resource identifier (must be unique across all resources)
    name: ClassVar[str]

    # Item that has to be owned for the resource to do anything
    item: ClassVar[str]

    def __init__(self, session: GameSession) -> None:
        """Bind the resource to a game session."""
        self.session = session

    def have(self) -> bool:
        """Check if the player owns the resource's item."""
        return self.session.have_item(self.item)
