"""Tiny stillsuit resource."""

from __future__ import annotations

import logging
import re
from typing import ClassVar

from kolkit.resources.base import BaseResource
from kolkit.resources.registry import ResourceRegistry
from kolkit.resources.stillsuit.distribution import compute_distribution, select_best
from kolkit.utils import round_half_up

logger = logging.getLogger(__name__)

# The distillate description spells experience modifiers differently
EXPERIENCE_MODIFIERS = {
    "Muscle Experience": "Experience (Muscle)",
    "Mysticality Experience": "Experience (Mysticality)",
    "Moxie Experience": "Experience (Moxie)",
}


@ResourceRegistry.register
class StillsuitResource(BaseResource):
    """Distils familiar sweat into a drinkable buff.

    The equipped familiar builds up sweat while wearing the stillsuit; the
    distillate's modifiers depend on which familiar wore it.
    """

    name: ClassVar[str] = "stillsuit"
    item: ClassVar[str] = "tiny stillsuit"

    def distillate_adventures(self) -> int:
        """Return the adventures gained from drinking the current distillate."""
        if not self.have():
            return 0
        sweat = self.session.get_int("familiarSweat")
        return round_half_up(max(sweat, 0) ** 0.4)

    def drink_distillate(self) -> bool:
        """Drink the stillsuit distillate.

        Returns:
            Whether the distillate was drunk.
        """
        if not self.have() or self.session.get_int("familiarSweat") <= 0:
            return False
        logger.info("Drinking stillsuit distillate")
        return self.session.cli_execute("drink stillsuit distillate")

    def distillate_modifier(self, modifier: str) -> int:
        """Return the value the current distillate gives for a modifier.

        Visits the distillate page first so the tracked modifiers are fresh.

        Args:
            modifier: A numeric modifier, such as "Item Drop".

        Returns:
            The modifier's value, or 0 if the distillate doesn't grant it.
        """
        self.session.visit_url("inventory.php?action=distill&pwd")
        distillate_mods = self.session.get_property("currentDistillateMods")

        adjusted = EXPERIENCE_MODIFIERS.get(modifier, modifier)
        match = re.search(rf"{re.escape(adjusted)}: \+?(-?\d+)", distillate_mods)
        return int(match.group(1)) if match else 0

    def modifier_ratio(self, familiar: str) -> dict[str, float]:
        """Return the relative weights of the modifiers `familiar` would produce."""
        return compute_distribution(self.session.familiar_tags(familiar))

    def best_familiar(self, modifier: str) -> str:
        """Return the owned familiar whose distillate carries the most of `modifier`.

        Raises:
            ValueError: If the player owns no familiars.
        """
        familiar = select_best(modifier, self.session.owned_familiars(), self.session.familiar_tags)
        logger.debug("Best stillsuit familiar for %s: %s", modifier, familiar)
        return familiar
