"""Weight distillate modifiers by a familiar's tags.

Each contributing tag carries an equal share of the distillate, so a
familiar tagged "robot", "haseyes" and "hasclaws" yields a third Muscle, a
third Item Drop and a third Weapon Damage.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from kolkit.resources.stillsuit.tags import EXCLUDED_TAGS, MODIFIER_TAGS
from kolkit.utils import max_by

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def compute_distribution(tags: Iterable[str]) -> dict[str, float]:
    """Calculate the ratio of distillate modifiers for a set of familiar tags.

    Tags in EXCLUDED_TAGS, and tags missing from MODIFIER_TAGS, are skipped
    and don't count toward the shares of the others.

    Args:
        tags: The familiar's tags.

    Returns:
        Dictionary mapping modifiers to their relative weight. Weights sum to
        1.0; modifiers no tag feeds are absent; no contributing tags gives {}.
    """
    modifiers: list[str] = []
    for tag in tags:
        if tag in EXCLUDED_TAGS:
            continue
        modifier = MODIFIER_TAGS.get(tag)
        if modifier is None:
            logger.warning("Ignoring unknown familiar tag '%s'", tag)
            continue
        modifiers.append(modifier)

    distribution: dict[str, float] = {}
    for modifier in modifiers:
        distribution[modifier] = distribution.get(modifier, 0.0) + 1 / len(modifiers)
    return distribution


def select_best(
    modifier: str,
    candidates: Iterable[T],
    tags_of: Callable[[T], Iterable[str]],
) -> T:
    """Pick the candidate whose distillate carries the most of `modifier`.

    Ties go to the earliest candidate, including when every candidate
    scores zero.

    Args:
        modifier: The modifier wanted from the distillate.
        candidates: Familiars (or anything tagged) to choose from.
        tags_of: Returns the tags of a candidate.

    Raises:
        ValueError: If there are no candidates.
    """
    return max_by(candidates, lambda candidate: compute_distribution(tags_of(candidate)).get(modifier, 0.0))
