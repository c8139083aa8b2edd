"""Bat wings resource."""

from __future__ import annotations

import logging
from typing import ClassVar

from kolkit.resources.base import BaseResource
from kolkit.resources.registry import ResourceRegistry

logger = logging.getLogger(__name__)

MAX_FREE_FLAPS = 5
BRIDGE_SKIP_PROGRESS = 25


@ResourceRegistry.register
class BatWingsResource(BaseResource):
    """Bat wings grant three daily skills and occasional free fights."""

    name: ClassVar[str] = "bat_wings"
    item: ClassVar[str] = "bat wings"

    def _skill_remaining(self, skill: str) -> int:
        return self.session.skill_daily_limit(skill) if self.have() else 0

    def swoops_remaining(self) -> int:
        """Return how many times you can swoop like a bat today."""
        return self._skill_remaining("Swoop like a Bat")

    def rest_upside_down_remaining(self) -> int:
        """Return how many times you can rest upside down today."""
        return self._skill_remaining("Rest upside down")

    def cauldrons_remaining(self) -> int:
        """Return how many times you can summon a cauldron of bats today."""
        return self._skill_remaining("Summon Cauldron of Bats")

    def flap_chance(self, flaps: int | None = None) -> float:
        """Return the chance of a free fight with the wings equipped.

        Args:
            flaps: Free fights the wings have already granted today;
                defaults to the tracked count.
        """
        if flaps is None:
            flaps = self.session.get_int("_batWingsFreeFights")
        return 1 / (2 + flaps) if flaps < MAX_FREE_FLAPS else 0.0

    def bridge_skip(self) -> bool:
        """Fly over the orc chasm instead of finishing the bridge.

        Returns:
            Whether the quest advanced past the bridge.
        """
        progress = self.session.get_int("chasmBridgeProgress")
        if progress < BRIDGE_SKIP_PROGRESS or self.session.get_property("questL09Topping") != "started":
            return False
        logger.info("Skipping the orc chasm bridge at progress %d", progress)
        # use existing materials, jump, then tell the highland lord
        self.session.visit_url(f"place.php?whichplace=orc_chasm&action=bridge{progress}")
        self.session.visit_url("place.php?whichplace=orc_chasm&action=bridge_jump")
        self.session.visit_url("place.php?whichplace=highlands&action=highlands_dude")
        return self.session.get_property("questL09Topping") == "step2"
