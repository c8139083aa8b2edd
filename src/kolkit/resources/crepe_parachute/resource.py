"""Crepe paper parachute cape resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from kolkit.resources.base import BaseResource
from kolkit.resources.registry import ResourceRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

BEIGE_EFFECT = "Everything looks Beige"
MONSTER_OPTIONS_XPATH = "//select[@name='monid']//option[position()>1]/@value"


@ResourceRegistry.register
class CrepeParachuteResource(BaseResource):
    """Parachutes into a fight with one of the monsters the cape offers."""

    name: ClassVar[str] = "crepe_parachute"
    item: ClassVar[str] = "crepe paper parachute cape"

    def available_monsters(self, html: str) -> list[str]:
        """Return the monsters offered on a parachute page."""
        return [
            self.session.to_monster(int(monster_id))
            for monster_id in self.session.xpath(html, MONSTER_OPTIONS_XPATH)
        ]

    def fight(self, target: str | Callable[[list[str]], str]) -> bool:
        """Parachute into a fight.

        Args:
            target: The monster to fight, or a function choosing one from the
                monsters on offer.

        Returns:
            Whether we parachuted into the target monster.
        """
        if not self.have() or self.session.have_effect(BEIGE_EFFECT):
            return False
        monsters = self.available_monsters(self.session.visit_url("inventory.php?action=parachute&pwd"))
        monster = target(monsters) if callable(target) else target
        if monster not in monsters:
            logger.info("Parachute target %s not on offer", monster)
            return False
        self.session.run_choice(1, f"monid={self.session.monster_id(monster)}")
        return True
