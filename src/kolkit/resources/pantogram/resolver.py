"""Resolve pantogram selections into item requirements and a choice request.

Selections come in two stages. A PartialSelection may leave any slot empty
and is only good for working out what the chosen sacrifices cost. A
CompleteSelection has all five slots and is the only thing that can be
encoded into the request the pantogram choice expects.

Example:
    selection = PartialSelection.from_dict({
        "left_sacrifice": "HP Regen Max: 10",
        "right_sacrifice": "Meat Drop: 30",
    })
    compute_requirements(selection)
    # {"red pixel potion": 1, "taco shell": 1}

    complete = selection.complete(
        alignment=Alignment.MOXIE,
        element=Element.HOT,
        middle_sacrifice=MiddleSacrifice.COMBAT_RATE_MINUS_5,
    )
    compute_encoded_selection(complete, session.item_id).to_query()
    # "m=3&e=1&s1=<red pixel potion id>,1&s2=<taco shell id>,1&s3=-1,0"
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from kolkit.resources.pantogram.tables import (
    ALIGNMENT_CODES,
    ELEMENT_CODES,
    LEFT_SACRIFICES,
    MIDDLE_SACRIFICES,
    RIGHT_SACRIFICES,
    Alignment,
    Component,
    Element,
    LeftSacrifice,
    MiddleSacrifice,
    NoComponent,
    RightSacrifice,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from kolkit.resources.pantogram.tables import SlotCost

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

SLOT_TYPES: dict[str, type[Enum]] = {
    "alignment": Alignment,
    "element": Element,
    "left_sacrifice": LeftSacrifice,
    "middle_sacrifice": MiddleSacrifice,
    "right_sacrifice": RightSacrifice,
}


def _parse_slot(slot: str, value: Any, enum_type: type[E]) -> E:  # noqa: ANN401
    """Convert a label (or an enum member) into the slot's enum member."""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(repr(member.value) for member in enum_type)
        msg = f"Invalid {slot} {value!r}; expected one of: {choices}"
        raise ValueError(msg) from None


def _parse_slots(data: Mapping[str, Any]) -> dict[str, Enum]:
    unknown = sorted(set(data) - set(SLOT_TYPES))
    if unknown:
        msg = f"Unknown pantogram slot(s): {', '.join(unknown)}"
        raise ValueError(msg)
    return {
        slot: _parse_slot(slot, value, SLOT_TYPES[slot])
        for slot, value in data.items()
        if value is not None
    }


def _coerce_fields(selection: PartialSelection | CompleteSelection) -> None:
    """Replace labels with enum members in place, rejecting values foreign to their slot."""
    for field in dataclasses.fields(selection):
        value = getattr(selection, field.name)
        if value is not None:
            object.__setattr__(selection, field.name, _parse_slot(field.name, value, SLOT_TYPES[field.name]))


@dataclass(frozen=True)
class PartialSelection:
    """Pantogram selection where any slot may still be undecided.

    Attributes:
        alignment: Stat the pants improve.
        element: Elemental resistance of the pants.
        left_sacrifice: Modifier from the leftmost sacrifice.
        middle_sacrifice: Modifier from the middle sacrifice.
        right_sacrifice: Modifier from the rightmost sacrifice.
    """

    alignment: Alignment | None = None
    element: Element | None = None
    left_sacrifice: LeftSacrifice | None = None
    middle_sacrifice: MiddleSacrifice | None = None
    right_sacrifice: RightSacrifice | None = None

    def __post_init__(self) -> None:
        _coerce_fields(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PartialSelection:
        """Create a selection from slot names mapped to modifier labels.

        Raises:
            ValueError: If a slot name or a label is not known.
        """
        return cls(**_parse_slots(data))

    def missing_slots(self) -> list[str]:
        """Return the names of the slots that are still empty."""
        return [field.name for field in dataclasses.fields(self) if getattr(self, field.name) is None]

    def complete(self, **overrides: Any) -> CompleteSelection:  # noqa: ANN401
        """Fill the remaining slots and return a CompleteSelection.

        Args:
            **overrides: Slot values (labels or enum members) to set or replace.

        Raises:
            ValueError: If any slot is still empty after applying overrides.
        """
        values = {field.name: getattr(self, field.name) for field in dataclasses.fields(self)}
        values.update(_parse_slots(overrides))
        return CompleteSelection(**values)


@dataclass(frozen=True)
class CompleteSelection:
    """Pantogram selection with every slot decided, ready to be encoded."""

    alignment: Alignment
    element: Element
    left_sacrifice: LeftSacrifice
    middle_sacrifice: MiddleSacrifice
    right_sacrifice: RightSacrifice

    def __post_init__(self) -> None:
        missing = [field.name for field in dataclasses.fields(self) if getattr(self, field.name) is None]
        if missing:
            msg = f"Cannot complete pantogram selection; missing: {', '.join(missing)}"
            raise ValueError(msg)
        _coerce_fields(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompleteSelection:
        """Create a complete selection from slot names mapped to modifier labels.

        Raises:
            ValueError: If a slot is missing, unknown, or has an unknown label.
        """
        return PartialSelection.from_dict(data).complete()

    def to_partial(self) -> PartialSelection:
        """Return the same selection as a PartialSelection."""
        return PartialSelection(**dataclasses.asdict(self))


@dataclass(frozen=True)
class EncodedSelection:
    """Five-field request understood by the pantogram choice.

    Field order matches the order the game reads them in: alignment,
    element, then the left, right and middle sacrifice pairs.

    Attributes:
        alignment_code: 1-based alignment index.
        element_code: 1-based element index.
        left_sacrifice_pair: "<cost>,<quantity>" for the left sacrifice.
        right_sacrifice_pair: "<cost>,<quantity>" for the right sacrifice.
        middle_sacrifice_pair: "<cost>,<quantity>" for the middle sacrifice.
    """

    alignment_code: int
    element_code: int
    left_sacrifice_pair: str
    right_sacrifice_pair: str
    middle_sacrifice_pair: str

    def to_query(self) -> str:
        """Render the selection as choice request parameters."""
        return (
            f"m={self.alignment_code}&e={self.element_code}"
            f"&s1={self.left_sacrifice_pair}"
            f"&s2={self.right_sacrifice_pair}"
            f"&s3={self.middle_sacrifice_pair}"
        )


def compute_requirements(
    selection: PartialSelection,
    left_sacrifices: Mapping[LeftSacrifice, SlotCost] = LEFT_SACRIFICES,
    middle_sacrifices: Mapping[MiddleSacrifice, SlotCost] = MIDDLE_SACRIFICES,
    right_sacrifices: Mapping[RightSacrifice, SlotCost] = RIGHT_SACRIFICES,
) -> dict[str, int]:
    """Find the items needed for the sacrifices in a selection.

    Free variants contribute nothing; alignment and element never do. An
    item named by more than one slot has its quantities added together.

    Args:
        selection: Slots chosen so far.
        left_sacrifices: Cost table for the left slot.
        middle_sacrifices: Cost table for the middle slot.
        right_sacrifices: Cost table for the right slot.

    Returns:
        Dictionary mapping item names to the quantity consumed.
    """
    costs: list[SlotCost] = []
    if selection.left_sacrifice is not None:
        costs.append(left_sacrifices[selection.left_sacrifice])
    if selection.right_sacrifice is not None:
        costs.append(right_sacrifices[selection.right_sacrifice])
    if selection.middle_sacrifice is not None:
        costs.append(middle_sacrifices[selection.middle_sacrifice])

    requirements: dict[str, int] = {}
    for cost in costs:
        if isinstance(cost, Component):
            requirements[cost.item] = requirements.get(cost.item, 0) + cost.quantity
    return requirements


def encode_sacrifice(cost: SlotCost, item_id: Callable[[str], int]) -> str:
    """Encode one sacrifice as "<cost>,<quantity>"."""
    if isinstance(cost, NoComponent):
        return f"{cost.code},0"
    return f"{item_id(cost.item)},{cost.quantity}"


def compute_encoded_selection(
    selection: CompleteSelection,
    item_id: Callable[[str], int],
    left_sacrifices: Mapping[LeftSacrifice, SlotCost] = LEFT_SACRIFICES,
    middle_sacrifices: Mapping[MiddleSacrifice, SlotCost] = MIDDLE_SACRIFICES,
    right_sacrifices: Mapping[RightSacrifice, SlotCost] = RIGHT_SACRIFICES,
) -> EncodedSelection:
    """Encode a complete selection for the pantogram choice.

    Affordability is not checked here; see compute_requirements(), which
    takes the same cost table overrides.

    Args:
        selection: All five chosen slots.
        item_id: Lookup from item name to the game's item number,
            usually GameSession.item_id.
        left_sacrifices: Cost table for the left slot.
        middle_sacrifices: Cost table for the middle slot.
        right_sacrifices: Cost table for the right slot.

    Returns:
        The encoded selection.
    """
    encoded = EncodedSelection(
        alignment_code=ALIGNMENT_CODES[selection.alignment],
        element_code=ELEMENT_CODES[selection.element],
        left_sacrifice_pair=encode_sacrifice(left_sacrifices[selection.left_sacrifice], item_id),
        right_sacrifice_pair=encode_sacrifice(right_sacrifices[selection.right_sacrifice], item_id),
        middle_sacrifice_pair=encode_sacrifice(middle_sacrifices[selection.middle_sacrifice], item_id),
    )
    logger.debug("Encoded pantogram selection: %s", encoded.to_query())
    return encoded
