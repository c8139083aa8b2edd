"""Tiny stillsuit: familiar sweat distilled into a drink."""

from kolkit.resources.stillsuit.distribution import compute_distribution, select_best
from kolkit.resources.stillsuit.resource import StillsuitResource
from kolkit.resources.stillsuit.tags import EXCLUDED_TAGS, MODIFIER_TAGS

__all__ = [
    "EXCLUDED_TAGS",
    "MODIFIER_TAGS",
    "StillsuitResource",
    "compute_distribution",
    "select_best",
]
