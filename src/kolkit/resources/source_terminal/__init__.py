"""Source Terminal: campground buffs, skills and items."""

from kolkit.resources.source_terminal.resource import SourceTerminalResource
from kolkit.resources.source_terminal.tables import Buff, RolloverBuff, Skill, TerminalItem

__all__ = [
    "Buff",
    "RolloverBuff",
    "Skill",
    "SourceTerminalResource",
    "TerminalItem",
]
