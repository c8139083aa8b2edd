"""Static pantogram tables.

The pantogram configures one pair of pants from five independent slots. The
alignment and element slots are free choices, sent as their 1-based index.
Each sacrifice slot grants a modifier and costs a component item, except for
two free variants per slot, which the game addresses with the sentinel codes
-1 and -2 instead of an item number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Literal


class Alignment(Enum):
    """Stat the pants improve."""

    MUSCLE = "Muscle"
    MYSTICALITY = "Mysticality"
    MOXIE = "Moxie"


class Element(Enum):
    """Elemental resistance granted by the pants."""

    HOT = "Hot Resistance: 2"
    COLD = "Cold Resistance: 2"
    SPOOKY = "Spooky Resistance: 2"
    SLEAZE = "Sleaze Resistance: 2"
    STENCH = "Stench Resistance: 2"


class LeftSacrifice(Enum):
    """Modifier granted by the leftmost sacrifice."""

    MAXIMUM_HP_40 = "Maximum HP: 40"
    MAXIMUM_MP_20 = "Maximum MP: 20"
    HP_REGEN_MAX_10 = "HP Regen Max: 10"
    HP_REGEN_MAX_15 = "HP Regen Max: 15"
    HP_REGEN_MAX_20 = "HP Regen Max: 20"
    MP_REGEN_MAX_10 = "MP Regen Max: 10"
    MP_REGEN_MAX_15 = "MP Regen Max: 15"
    MP_REGEN_MAX_20 = "MP Regen Max: 20"
    MANA_COST_MINUS_3 = "Mana Cost: -3"


class MiddleSacrifice(Enum):
    """Modifier granted by the middle sacrifice."""

    COMBAT_RATE_MINUS_5 = "Combat Rate: -5"
    COMBAT_RATE_5 = "Combat Rate: 5"
    INITIATIVE_50 = "Initiative: 50"
    CRITICAL_HIT_PERCENT_10 = "Critical Hit Percent: 10"
    FAMILIAR_WEIGHT_10 = "Familiar Weight: 10"
    CANDY_DROP_100 = "Candy Drop: 100"
    ITEM_DROP_PENALTY_MINUS_10 = "Item Drop Penalty: -10"
    FISHING_SKILL_5 = "Fishing Skill: 5"
    POOL_SKILL_5 = "Pool Skill: 5"
    DROPS_ITEMS = "Drops Items: true"
    AVATAR_PURPLE = "Avatar: Purple"


class RightSacrifice(Enum):
    """Modifier granted by the rightmost sacrifice."""

    WEAPON_DAMAGE_20 = "Weapon Damage: 20"
    SPELL_DAMAGE_PERCENT_20 = "Spell Damage Percent: 20"
    MEAT_DROP_30 = "Meat Drop: 30"
    MEAT_DROP_60 = "Meat Drop: 60"
    ITEM_DROP_15 = "Item Drop: 15"
    ITEM_DROP_30 = "Item Drop: 30"
    MUSCLE_EXPERIENCE_3 = "Muscle Experience: 3"
    MYSTICALITY_EXPERIENCE_3 = "Mysticality Experience: 3"
    MOXIE_EXPERIENCE_3 = "Moxie Experience: 3"
    MUSCLE_EXPERIENCE_PERCENT_25 = "Muscle Experience Percent: 25"
    MYSTICALITY_EXPERIENCE_PERCENT_25 = "Mysticality Experience Percent: 25"
    MOXIE_EXPERIENCE_PERCENT_25 = "Moxie Experience Percent: 25"


@dataclass(frozen=True)
class NoComponent:
    """Free sacrifice variant, addressed by a sentinel code instead of an item.

    Attributes:
        code: -1 or -2; the game tells the two free variants of a slot apart by it.
    """

    code: Literal[-1, -2]


@dataclass(frozen=True)
class Component:
    """Sacrifice variant that consumes a component item.

    Attributes:
        item: Name of the item consumed.
        quantity: How many of the item are consumed.
    """

    item: str
    quantity: int


SlotCost = NoComponent | Component

ALIGNMENT_CODES = MappingProxyType(
    {
        Alignment.MUSCLE: 1,
        Alignment.MYSTICALITY: 2,
        Alignment.MOXIE: 3,
    }
)

ELEMENT_CODES = MappingProxyType(
    {
        Element.HOT: 1,
        Element.COLD: 2,
        Element.SPOOKY: 3,
        Element.SLEAZE: 4,
        Element.STENCH: 5,
    }
)

LEFT_SACRIFICES = MappingProxyType(
    {
        LeftSacrifice.MAXIMUM_HP_40: NoComponent(-1),
        LeftSacrifice.MAXIMUM_MP_20: NoComponent(-2),
        LeftSacrifice.HP_REGEN_MAX_10: Component("red pixel potion", 1),
        LeftSacrifice.HP_REGEN_MAX_15: Component("royal jelly", 1),
        LeftSacrifice.HP_REGEN_MAX_20: Component("scented massage oil", 1),
        LeftSacrifice.MP_REGEN_MAX_10: Component("Cherry Cloaca Cola", 1),
        LeftSacrifice.MP_REGEN_MAX_15: Component("bubblin' crude", 1),
        LeftSacrifice.MP_REGEN_MAX_20: Component("glowing New Age crystal", 1),
        LeftSacrifice.MANA_COST_MINUS_3: Component("baconstone", 1),
    }
)

MIDDLE_SACRIFICES = MappingProxyType(
    {
        MiddleSacrifice.COMBAT_RATE_MINUS_5: NoComponent(-1),
        MiddleSacrifice.COMBAT_RATE_5: NoComponent(-2),
        MiddleSacrifice.CRITICAL_HIT_PERCENT_10: Component("hamethyst", 1),
        MiddleSacrifice.INITIATIVE_50: Component("bar skin", 1),
        MiddleSacrifice.FAMILIAR_WEIGHT_10: Component("lead necklace", 11),
        MiddleSacrifice.CANDY_DROP_100: Component("huge bowl of candy", 1),
        MiddleSacrifice.ITEM_DROP_PENALTY_MINUS_10: Component("sea salt crystal", 11),
        MiddleSacrifice.FISHING_SKILL_5: Component("wriggling worm", 1),
        MiddleSacrifice.POOL_SKILL_5: Component("8-ball", 15),
        MiddleSacrifice.AVATAR_PURPLE: Component("moxie weed", 99),
        MiddleSacrifice.DROPS_ITEMS: Component("ten-leaf clover", 1),
    }
)

RIGHT_SACRIFICES = MappingProxyType(
    {
        RightSacrifice.WEAPON_DAMAGE_20: NoComponent(-1),
        RightSacrifice.SPELL_DAMAGE_PERCENT_20: NoComponent(-2),
        RightSacrifice.MEAT_DROP_30: Component("taco shell", 1),
        RightSacrifice.MEAT_DROP_60: Component("porquoise", 1),
        RightSacrifice.ITEM_DROP_15: Component("fairy gravy boat", 1),
        RightSacrifice.ITEM_DROP_30: Component("tiny dancer", 1),
        RightSacrifice.MUSCLE_EXPERIENCE_3: Component("Knob Goblin firecracker", 3),
        RightSacrifice.MYSTICALITY_EXPERIENCE_3: Component("razor-sharp can lid", 3),
        RightSacrifice.MOXIE_EXPERIENCE_3: Component("spider web", 3),
        RightSacrifice.MUSCLE_EXPERIENCE_PERCENT_25: Component("synthetic marrow", 5),
        RightSacrifice.MYSTICALITY_EXPERIENCE_PERCENT_25: Component("haunted battery", 5),
        RightSacrifice.MOXIE_EXPERIENCE_PERCENT_25: Component("the funk", 5),
    }
)
