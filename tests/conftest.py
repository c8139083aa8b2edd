"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from kolkit.conf import settings
from kolkit.resources.registry import ResourceRegistry
from kolkit.session import GameSession

if TYPE_CHECKING:
    from collections.abc import Generator


class FakeSession(GameSession):
    """In-memory game session recording every action it is asked to take."""

    def __init__(self) -> None:
        """Start with an empty account."""
        self.items: dict[str, int] = {}
        self.item_ids: dict[str, int] = {}
        self.effects: set[str] = set()
        self.campground: set[str] = set()
        self.properties: dict[str, str] = {}
        self.familiars: dict[str, list[str]] = {}
        self.daily_limits: dict[str, int] = {}
        self.monsters: dict[int, str] = {}
        self.xpath_results: list[str] = []
        self.cli_result = True

        # Called with the URL when it is visited, to simulate game-side effects
        self.url_handlers: dict[str, Callable[[str], None]] = {}

        self.visited: list[str] = []
        self.commands: list[str] = []
        self.choices: list[tuple[int, str]] = []

    def item_amount(self, item: str) -> int:
        return self.items.get(item, 0)

    def item_id(self, item: str) -> int:
        return self.item_ids[item]

    def have_effect(self, effect: str) -> bool:
        return effect in self.effects

    def have_in_campground(self, item: str) -> bool:
        return item in self.campground

    def get_property(self, name: str) -> str:
        return self.properties.get(name, "")

    def visit_url(self, url: str) -> str:
        self.visited.append(url)
        handler = self.url_handlers.get(url)
        if handler:
            handler(url)
        return f"<html>{url}</html>"

    def run_choice(self, option: int, extra: str = "") -> str:
        self.choices.append((option, extra))
        return ""

    def cli_execute(self, command: str) -> bool:
        self.commands.append(command)
        return self.cli_result

    def xpath(self, html: str, query: str) -> list[str]:
        return list(self.xpath_results)

    def familiar_tags(self, familiar: str) -> list[str]:
        return self.familiars[familiar]

    def owned_familiars(self) -> list[str]:
        return list(self.familiars)

    def skill_daily_limit(self, skill: str) -> int:
        return self.daily_limits.get(skill, 0)

    def to_skill(self, name: str) -> str:
        return name.capitalize()

    def to_monster(self, monster_id: int) -> str:
        return self.monsters[monster_id]

    def monster_id(self, monster: str) -> int:
        return next(number for number, name in self.monsters.items() if name == monster)


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        LOG_LEVEL="DEBUG",
        PANTOGRAM_ITEM_ID=9573,
        PANTOGRAM_CHOICE_ID=1270,
    )
    yield
    settings._wrapped = None


@pytest.fixture
def session() -> FakeSession:
    """Provide an empty in-memory game session."""
    return FakeSession()


@pytest.fixture
def preserve_registry() -> Generator[None]:
    """Restore the resource registry after a test that clears or extends it."""
    saved = ResourceRegistry.get_all()
    yield
    ResourceRegistry.clear()
    ResourceRegistry._resources.update(saved)
