"""Abstract game session used by every resource adapter.

kolkit never talks to the game itself. Calling code subclasses GameSession
over whatever client it drives (a scripting bridge, a browser session, a test
double) and passes the instance to the resources. Each abstract method mirrors
one primitive of the game's scripting API.

Example:
    class MafiaSession(GameSession):
        def item_amount(self, item: str) -> int:
            return bridge.call("item_amount", item)

        ...

    pantogram = PantogramResource(MafiaSession())
    if pantogram.have():
        pantogram.make_pants(...)
"""

from abc import ABC, abstractmethod


class GameSession(ABC):
    """Base class for access to game state and game actions."""

    @abstractmethod
    def item_amount(self, item: str) -> int:
        """Return how many of an item are in the player's inventory."""
        ...

    @abstractmethod
    def item_id(self, item: str) -> int:
        """Return the game's numeric identifier for an item."""
        ...

    @abstractmethod
    def have_effect(self, effect: str) -> bool:
        """Check if the player currently has an effect active."""
        ...

    @abstractmethod
    def have_in_campground(self, item: str) -> bool:
        """Check if an item is installed in the player's campground."""
        ...

    @abstractmethod
    def get_property(self, name: str) -> str:
        """Return the raw string value of a tracked game property ("" when unset)."""
        ...

    @abstractmethod
    def visit_url(self, url: str) -> str:
        """Request a game page and return its HTML."""
        ...

    @abstractmethod
    def run_choice(self, option: int, extra: str = "") -> str:
        """Pick an option in the current choice adventure and return the resulting HTML."""
        ...

    @abstractmethod
    def cli_execute(self, command: str) -> bool:
        """Run a client command and return whether it succeeded."""
        ...

    @abstractmethod
    def xpath(self, html: str, query: str) -> list[str]:
        """Evaluate an XPath query against a page and return matching values."""
        ...

    @abstractmethod
    def familiar_tags(self, familiar: str) -> list[str]:
        """Return the descriptive tags attached to a familiar."""
        ...

    @abstractmethod
    def owned_familiars(self) -> list[str]:
        """Return the familiars in the player's terrarium, in game order."""
        ...

    @abstractmethod
    def skill_daily_limit(self, skill: str) -> int:
        """Return how many more times a skill can be cast today."""
        ...

    @abstractmethod
    def to_skill(self, name: str) -> str:
        """Resolve a partial or lowercase skill name to its canonical name."""
        ...

    @abstractmethod
    def to_monster(self, monster_id: int) -> str:
        """Return the monster name for a monster number."""
        ...

    @abstractmethod
    def monster_id(self, monster: str) -> int:
        """Return the monster number for a monster name."""
        ...

    def have_item(self, item: str, quantity: int = 1) -> bool:
        """Check if the player holds at least `quantity` of an item."""
        return self.item_amount(item) >= quantity

    def get_int(self, name: str, default: int = 0) -> int:
        """Return a numeric game property, or `default` when unset or not a number.

        Args:
            name: Property name (e.g., "familiarSweat").
            default: Value returned for empty or non-numeric properties.

        Returns:
            The property parsed as an integer.
        """
        value = self.get_property(name).strip()
        try:
            return int(value)
        except ValueError:
            return default
