"""Tests for the stillsuit distribution and resource."""

from __future__ import annotations

import unittest
from typing import TYPE_CHECKING

import pytest

from kolkit.resources.stillsuit import (
    EXCLUDED_TAGS,
    MODIFIER_TAGS,
    StillsuitResource,
    compute_distribution,
    select_best,
)

if TYPE_CHECKING:
    from tests.conftest import FakeSession


class TestModifierTags(unittest.TestCase):
    """Test the tag table."""

    def test_excluded_tag_is_not_mapped(self) -> None:
        """Test pokefam is excluded and absent from the table."""
        assert "pokefam" in EXCLUDED_TAGS
        assert "pokefam" not in MODIFIER_TAGS

    def test_table_size(self) -> None:
        """Test every familiar tag is mapped."""
        assert len(MODIFIER_TAGS) == 47


class TestComputeDistribution(unittest.TestCase):
    """Test compute_distribution()."""

    def test_equal_shares(self) -> None:
        """Test each tag carries an equal share of its modifier."""
        result = compute_distribution(["robot", "haseyes", "hasclaws", "hasbones"])

        assert result == pytest.approx({"Muscle": 0.5, "Item Drop": 0.25, "Weapon Damage": 0.25})

    def test_weights_sum_to_one(self) -> None:
        """Test the weights of any tagged familiar sum to one."""
        for tags in (
            ["cute"],
            ["animal", "haswings", "flies", "hasbeak", "haseyes", "haslegs"],
            list(MODIFIER_TAGS),
        ):
            assert sum(compute_distribution(tags).values()) == pytest.approx(1.0)

    def test_untouched_modifiers_are_absent(self) -> None:
        """Test modifiers without tags are not reported with zero weight."""
        result = compute_distribution(["hot"])

        assert result == {"Hot Damage": 1.0}

    def test_no_tags(self) -> None:
        """Test an untagged familiar gives an empty distribution."""
        assert compute_distribution([]) == {}

    def test_only_excluded_tag(self) -> None:
        """Test a familiar tagged only pokefam gives an empty distribution."""
        assert compute_distribution(["pokefam"]) == {}

    def test_excluded_tag_does_not_dilute(self) -> None:
        """Test pokefam doesn't take a share from the other tags."""
        assert compute_distribution(["robot", "pokefam"]) == {"Muscle": 1.0}

    def test_unknown_tag_is_ignored(self) -> None:
        """Test a tag missing from the table is skipped."""
        with self.assertLogs("kolkit.resources.stillsuit.distribution", level="WARNING"):
            result = compute_distribution(["sparkly", "cold"])

        assert result == {"Cold Damage": 1.0}

    def test_accepts_any_iterable(self) -> None:
        """Test tags can be passed as a tuple or generator."""
        assert compute_distribution(tag for tag in ("fast", "swims")) == {"Initiative": 1.0}


class TestSelectBest(unittest.TestCase):
    """Test select_best()."""

    def setUp(self) -> None:
        """Build three familiars scoring 0.6, 0.6 and 0.3 Muscle."""
        self.tags = {
            "A": ["robot", "mineral", "organic", "haseyes", "object"],
            "B": ["robot", "mineral", "organic", "food", "animal"],
            "C": ["robot", "mineral", "organic", "haseyes", "object", "haslegs", "food", "vegetable", "edible", "cute"],
        }

    def test_first_of_tied_maxima(self) -> None:
        """Test ties go to the first candidate."""
        assert select_best("Muscle", ["A", "B", "C"], self.tags.__getitem__) == "A"

    def test_strict_maximum(self) -> None:
        """Test the highest weight wins regardless of position."""
        assert select_best("Muscle", ["C", "B"], self.tags.__getitem__) == "B"

    def test_all_zero_returns_first(self) -> None:
        """Test a modifier nobody provides still returns the first candidate."""
        assert select_best("Hot Damage", ["C", "A", "B"], self.tags.__getitem__) == "C"

    def test_untagged_candidates(self) -> None:
        """Test untagged candidates score zero but remain eligible."""
        assert select_best("Muscle", ["X", "Y"], lambda _familiar: []) == "X"

    def test_no_candidates(self) -> None:
        """Test an empty candidate list is rejected."""
        with pytest.raises(ValueError, match="empty"):
            select_best("Muscle", [], self.tags.__getitem__)


@pytest.fixture
def stillsuit(session: FakeSession) -> StillsuitResource:
    """Provide a stillsuit owned by the player."""
    session.items["tiny stillsuit"] = 1
    return StillsuitResource(session)


def test_distillate_adventures(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test adventures grow with the 0.4 power of sweat."""
    session.properties["familiarSweat"] = "100"

    assert stillsuit.distillate_adventures() == 6


def test_distillate_adventures_small_sweat(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test sweat of one gives one adventure."""
    session.properties["familiarSweat"] = "1"

    assert stillsuit.distillate_adventures() == 1


def test_distillate_adventures_without_suit(session: FakeSession) -> None:
    """Test no stillsuit means no adventures."""
    session.properties["familiarSweat"] = "100"

    assert StillsuitResource(session).distillate_adventures() == 0


def test_drink_distillate(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test drinking runs the drink command."""
    session.properties["familiarSweat"] = "20"

    assert stillsuit.drink_distillate() is True
    assert session.commands == ["drink stillsuit distillate"]


def test_drink_distillate_without_sweat(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test nothing is drunk without sweat."""
    session.properties["familiarSweat"] = "0"

    assert stillsuit.drink_distillate() is False
    assert session.commands == []


def test_distillate_modifier(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test modifiers are parsed from the tracked distillate description."""
    session.properties["currentDistillateMods"] = "Item Drop: +15, Experience (Muscle): +4, Damage Reduction: -3"

    assert stillsuit.distillate_modifier("Item Drop") == 15
    assert stillsuit.distillate_modifier("Muscle Experience") == 4
    assert stillsuit.distillate_modifier("Damage Reduction") == -3
    assert stillsuit.distillate_modifier("Initiative") == 0
    assert session.visited[0] == "inventory.php?action=distill&pwd"


def test_modifier_ratio(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test modifier_ratio() looks up the familiar's tags."""
    session.familiars["Hovering Sombrero"] = ["hovers", "object"]

    assert stillsuit.modifier_ratio("Hovering Sombrero") == {"Initiative": 0.5, "Item Drop": 0.5}


def test_best_familiar(stillsuit: StillsuitResource, session: FakeSession) -> None:
    """Test the owned familiar with the most weight for a modifier wins."""
    session.familiars.update(
        {
            "Mosquito": ["animal", "insect", "haswings", "flies", "bite"],
            "Cornbeefadon": ["food", "edible", "animal"],
            "Leprechaun": ["humanoid", "hashands", "cute"],
        }
    )

    assert stillsuit.best_familiar("Food Drop") == "Cornbeefadon"
    assert stillsuit.best_familiar("Moxie") == "Leprechaun"
