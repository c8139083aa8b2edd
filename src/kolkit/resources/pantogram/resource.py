"""Portable pantogram resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from kolkit.conf import settings
from kolkit.resources.base import BaseResource
from kolkit.resources.pantogram.resolver import (
    CompleteSelection,
    compute_encoded_selection,
    compute_requirements,
)
from kolkit.resources.registry import ResourceRegistry

if TYPE_CHECKING:
    from kolkit.resources.pantogram.tables import (
        Alignment,
        Element,
        LeftSacrifice,
        MiddleSacrifice,
        RightSacrifice,
    )

logger = logging.getLogger(__name__)


@ResourceRegistry.register
class PantogramResource(BaseResource):
    """Builds pantogram pants from a chosen set of modifiers.

    Only one pair of pantogram pants can exist at a time, so making pants
    fails while a pair is already owned.
    """

    name: ClassVar[str] = "pantogram"
    item: ClassVar[str] = "portable pantogram"
    pants: ClassVar[str] = "pantogram pants"

    def have_pants(self) -> bool:
        """Check if the player owns pantogram pants."""
        return self.session.have_item(self.pants)

    def missing_requirements(self, selection: CompleteSelection) -> dict[str, int]:
        """Return how many of each component item the player still lacks."""
        missing: dict[str, int] = {}
        for item, quantity in compute_requirements(selection.to_partial()).items():
            shortfall = quantity - self.session.item_amount(item)
            if shortfall > 0:
                missing[item] = shortfall
        return missing

    def make_pants(
        self,
        alignment: Alignment | str,
        element: Element | str,
        left_sacrifice: LeftSacrifice | str,
        middle_sacrifice: MiddleSacrifice | str,
        right_sacrifice: RightSacrifice | str,
    ) -> bool:
        """Make a pair of pants with the given modifiers.

        Each modifier may be an enum member or its label, e.g. "Moxie" or
        "Hot Resistance: 2".

        Args:
            alignment: The stat the pants improve.
            element: The element the pants resist.
            left_sacrifice: Modifier from the leftmost sacrifice.
            middle_sacrifice: Modifier from the middle sacrifice.
            right_sacrifice: Modifier from the rightmost sacrifice.

        Returns:
            Whether pants were made. False without the pantogram, with pants
            already owned, or when a sacrifice can't be afforded.

        Raises:
            ValueError: If a modifier is not valid for its slot.
        """
        selection = CompleteSelection.from_dict(
            {
                "alignment": alignment,
                "element": element,
                "left_sacrifice": left_sacrifice,
                "middle_sacrifice": middle_sacrifice,
                "right_sacrifice": right_sacrifice,
            }
        )
        return self.make_pants_from_selection(selection)

    def make_pants_from_selection(self, selection: CompleteSelection) -> bool:
        """Make a pair of pants from a CompleteSelection.

        See make_pants() for the return value.
        """
        if self.have_pants() or not self.have():
            return False

        missing = self.missing_requirements(selection)
        if missing:
            logger.info("Can't afford pantogram sacrifices, missing %s", missing)
            return False

        encoded = compute_encoded_selection(selection, self.session.item_id)
        url = f"choice.php?whichchoice={settings.PANTOGRAM_CHOICE_ID}&pwd&option=1&{encoded.to_query()}"

        self.session.visit_url(f"inv_use.php?pwd&whichitem={settings.PANTOGRAM_ITEM_ID}")
        self.session.visit_url(url)
        made = self.have_pants()
        logger.info("Pantogram pants %s", "made" if made else "not made")
        return made
