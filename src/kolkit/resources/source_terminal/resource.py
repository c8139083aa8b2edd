"""Source Terminal resource."""

from __future__ import annotations

import logging
from enum import Enum
from typing import ClassVar, TypeVar

from kolkit.resources.base import BaseResource
from kolkit.resources.registry import ResourceRegistry
from kolkit.resources.source_terminal.tables import (
    DIGITIZE_CHIPS,
    EDUCATE_PROPERTIES,
    MAX_EDUCATED_SKILLS,
    Buff,
    RolloverBuff,
    Skill,
    TerminalItem,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _lookup(enum_type: type[E], value: E | str) -> E | None:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        return None


def _as_skill_list(skills: Skill | str | list[Skill | str] | tuple[Skill | str, ...]) -> list[Skill | str]:
    if isinstance(skills, list | tuple):
        return list(skills[:MAX_EDUCATED_SKILLS])
    return [skills]


@ResourceRegistry.register
class SourceTerminalResource(BaseResource):
    """Campground terminal handing out buffs, skills and items.

    The terminal teaches up to two skills at a time; which ones are loaded
    is tracked in the sourceTerminalEducate properties.
    """

    name: ClassVar[str] = "source_terminal"
    item: ClassVar[str] = "Source Terminal"

    def have(self) -> bool:
        """Check if the terminal is installed in the campground."""
        return self.session.have_in_campground(self.item)

    def _terminal(self, command: str) -> bool:
        logger.info("Source Terminal: %s", command)
        return self.session.cli_execute(f"terminal {command}")

    def enhance(self, buff: Buff | str) -> bool:
        """Acquire a buff from the terminal.

        Returns:
            False if `buff` is not a Buff the terminal offers.
        """
        known = _lookup(Buff, buff)
        if known is None:
            return False
        return self._terminal(f"enhance {known.value}")

    def enquiry(self, rollover_buff: RolloverBuff | str) -> bool:
        """Set the rollover buff.

        Returns:
            False if `rollover_buff` is not a RolloverBuff the terminal offers.
        """
        known = _lookup(RolloverBuff, rollover_buff)
        if known is None:
            return False
        return self._terminal(f"enquiry {known.value}")

    def educate(self, skills: Skill | str | list[Skill | str] | tuple[Skill | str, ...]) -> bool:
        """Load one or two skills into the terminal.

        Only the first two skills of a sequence are used.

        Returns:
            False if any skill is not one the terminal teaches; nothing is
            learned in that case.
        """
        requested = [_lookup(Skill, skill) for skill in _as_skill_list(skills)]
        known = [skill for skill in requested if skill is not None]
        if len(known) != len(requested):
            return False
        for skill in known:
            self._terminal(f"educate {skill.value}")
        return True

    def get_skills(self) -> list[Skill]:
        """Return the skills currently loaded in the terminal."""
        skills: list[Skill] = []
        for prop in EDUCATE_PROPERTIES:
            value = self.session.get_property(prop)
            if not value:
                continue
            skill = _lookup(Skill, self.session.to_skill(value.removesuffix(".edu")))
            if skill is not None:
                skills.append(skill)
        return skills

    def is_current_skill(self, skills: Skill | str | list[Skill | str] | tuple[Skill | str, ...]) -> bool:
        """Check if every given skill is currently loaded."""
        current = self.get_skills()
        return all(_lookup(Skill, skill) in current for skill in _as_skill_list(skills))

    def extrude(self, item: TerminalItem | str) -> bool:
        """Collect an item from the terminal (up to three times a day).

        Returns:
            False if `item` is not a TerminalItem the terminal makes.
        """
        known = _lookup(TerminalItem, item)
        if known is None:
            return False
        return self._terminal(f"extrude {known.value}")

    def get_chips(self) -> list[str]:
        """Return the chips installed in the terminal."""
        return [chip for chip in self.session.get_property("sourceTerminalChips").split(",") if chip]

    def get_digitize_uses(self) -> int:
        """Return the number of times Digitize was cast today."""
        return self.session.get_int("_sourceTerminalDigitizeUses")

    def get_digitize_monster(self) -> str | None:
        """Return the monster currently digitized, if any."""
        return self.session.get_property("_sourceTerminalDigitizeMonster") or None

    def get_digitize_monster_count(self) -> int:
        """Return the number of digitized monsters fought since the last cast."""
        return self.session.get_int("_sourceTerminalDigitizeMonsterCount")

    def get_maximum_digitize_uses(self) -> int:
        """Return the maximum number of Digitize casts per day."""
        chips = self.get_chips()
        return 1 + sum(1 for chip in DIGITIZE_CHIPS if chip in chips)

    def get_digitize_uses_remaining(self) -> int:
        """Return today's remaining Digitize casts."""
        return self.get_maximum_digitize_uses() - self.get_digitize_uses()

    def could_digitize(self) -> bool:
        """Check if Digitize has casts left today, whether or not it is loaded."""
        return self.get_digitize_uses() < self.get_maximum_digitize_uses()

    def prepare_digitize(self) -> bool:
        """Make sure Digitize is loaded, educating it if needed."""
        if not self.is_current_skill(Skill.DIGITIZE):
            return self.educate(Skill.DIGITIZE)
        return True

    def can_digitize(self) -> bool:
        """Check if Digitize can be cast right now, ignoring MP."""
        return self.could_digitize() and Skill.DIGITIZE in self.get_skills()

    def get_duplicate_uses(self) -> int:
        """Return the number of times Duplicate was cast today."""
        return self.session.get_int("_sourceTerminalDuplicateUses")

    def get_enhance_uses(self) -> int:
        """Return the number of times enhance was used today."""
        return self.session.get_int("_sourceTerminalEnhanceUses")

    def get_portscan_uses(self) -> int:
        """Return the number of times Portscan was cast today."""
        return self.session.get_int("_sourceTerminalPortscanUses")
