"""Tests for PantogramResource."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kolkit.resources.pantogram import (
    Alignment,
    CompleteSelection,
    Element,
    LeftSacrifice,
    MiddleSacrifice,
    PantogramResource,
    RightSacrifice,
)

if TYPE_CHECKING:
    from tests.conftest import FakeSession

CHOICE_URL = "choice.php?whichchoice=1270&pwd&option=1&m=2&e=3&s1=464,1&s2=-1,0&s3=1040,1"

SELECTION = CompleteSelection(
    alignment=Alignment.MYSTICALITY,
    element=Element.SPOOKY,
    left_sacrifice=LeftSacrifice.HP_REGEN_MAX_10,
    middle_sacrifice=MiddleSacrifice.CRITICAL_HIT_PERCENT_10,
    right_sacrifice=RightSacrifice.WEAPON_DAMAGE_20,
)


@pytest.fixture
def pantogram(session: FakeSession) -> PantogramResource:
    """Provide a pantogram owned by a player who can afford SELECTION."""
    session.items.update({"portable pantogram": 1, "red pixel potion": 2, "hamethyst": 1})
    session.item_ids.update({"red pixel potion": 464, "hamethyst": 1040})

    def grant_pants(_url: str) -> None:
        session.items["pantogram pants"] = 1

    session.url_handlers[CHOICE_URL] = grant_pants
    return PantogramResource(session)


def test_have(session: FakeSession) -> None:
    """Test have() checks for the portable pantogram."""
    resource = PantogramResource(session)
    assert resource.have() is False

    session.items["portable pantogram"] = 1
    assert resource.have() is True


def test_make_pants_visits_pantogram_then_choice(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test a successful build uses the pantogram and submits the encoded choice."""
    made = pantogram.make_pants_from_selection(SELECTION)

    assert made is True
    assert session.visited == ["inv_use.php?pwd&whichitem=9573", CHOICE_URL]


def test_make_pants_from_enum_arguments(pantogram: PantogramResource) -> None:
    """Test make_pants() builds the same selection from its arguments."""
    made = pantogram.make_pants(
        Alignment.MYSTICALITY,
        Element.SPOOKY,
        LeftSacrifice.HP_REGEN_MAX_10,
        MiddleSacrifice.CRITICAL_HIT_PERCENT_10,
        RightSacrifice.WEAPON_DAMAGE_20,
    )

    assert made is True
    assert pantogram.have_pants() is True


def test_make_pants_from_label_arguments(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test make_pants() accepts modifier labels in place of enum members."""
    made = pantogram.make_pants(
        "Mysticality",
        "Spooky Resistance: 2",
        "HP Regen Max: 10",
        "Critical Hit Percent: 10",
        "Weapon Damage: 20",
    )

    assert made is True
    assert session.visited == ["inv_use.php?pwd&whichitem=9573", CHOICE_URL]


def test_make_pants_rejects_unknown_label(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test an unknown label raises ValueError before anything is visited."""
    with pytest.raises(ValueError, match="Invalid element"):
        pantogram.make_pants(
            "Moxie",
            "Hot Resistance: 9",
            "HP Regen Max: 10",
            "Combat Rate: -5",
            "Weapon Damage: 20",
        )

    assert session.visited == []


def test_make_pants_rejects_member_from_another_slot(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test an enum member from the wrong slot raises ValueError."""
    with pytest.raises(ValueError, match="Invalid middle_sacrifice"):
        pantogram.make_pants(
            Alignment.MOXIE,
            Element.HOT,
            LeftSacrifice.HP_REGEN_MAX_10,
            LeftSacrifice.MAXIMUM_HP_40,
            RightSacrifice.WEAPON_DAMAGE_20,
        )

    assert session.visited == []


def test_make_pants_without_pantogram(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test nothing happens without the pantogram."""
    del session.items["portable pantogram"]

    assert pantogram.make_pants_from_selection(SELECTION) is False
    assert session.visited == []


def test_make_pants_with_pants_already(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test nothing happens while pants are already owned."""
    session.items["pantogram pants"] = 1

    assert pantogram.make_pants_from_selection(SELECTION) is False
    assert session.visited == []


def test_make_pants_when_unaffordable(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test nothing happens when a sacrifice is missing."""
    session.items["hamethyst"] = 0

    assert pantogram.make_pants_from_selection(SELECTION) is False
    assert session.visited == []


def test_make_pants_reports_game_failure(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test False is returned when the choice doesn't produce pants."""
    session.url_handlers.clear()

    assert pantogram.make_pants_from_selection(SELECTION) is False
    assert len(session.visited) == 2


def test_choice_settings_are_used(pantogram: PantogramResource, session: FakeSession) -> None:
    """Test the item and choice numbers come from settings."""
    from kolkit.conf import settings

    settings.configure(PANTOGRAM_ITEM_ID=1, PANTOGRAM_CHOICE_ID=2)

    pantogram.make_pants_from_selection(SELECTION)

    assert session.visited[0] == "inv_use.php?pwd&whichitem=1"
    assert session.visited[1].startswith("choice.php?whichchoice=2&pwd&option=1&")


def test_missing_requirements(session: FakeSession) -> None:
    """Test missing_requirements() reports only the shortfall."""
    session.items.update({"moxie weed": 40, "taco shell": 5})
    selection = CompleteSelection(
        alignment=Alignment.MOXIE,
        element=Element.HOT,
        left_sacrifice=LeftSacrifice.MAXIMUM_HP_40,
        middle_sacrifice=MiddleSacrifice.AVATAR_PURPLE,
        right_sacrifice=RightSacrifice.MEAT_DROP_30,
    )

    assert PantogramResource(session).missing_requirements(selection) == {"moxie weed": 59}
