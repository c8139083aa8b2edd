"""kolkit - item helpers for scripting Kingdom of Loathing.

This package wraps individual items behind small resource classes:
- Pantogram pants built from a chosen set of modifiers
- Stillsuit distillate and the familiar that makes the best of it
- Bat wings, the crepe paper parachute cape and the Source Terminal

Nothing here talks to the game directly. Subclass GameSession over your
game client and hand it to the resources.

Quick start:
    from kolkit import load_resources

    loader = load_resources(MySession())
    stillsuit = loader.get("stillsuit")
    print(stillsuit.best_familiar("Item Drop"))

Pure lookups work without a session:
    from kolkit.resources.pantogram import PartialSelection, compute_requirements

    compute_requirements(PartialSelection.from_dict({"right_sacrifice": "Meat Drop: 60"}))
    # {"porquoise": 1}
"""

__version__ = "0.1.0"

from kolkit.conf import settings
from kolkit.helpers import load_resources, setup_logging
from kolkit.resources import BaseResource, ResourceLoader, ResourceRegistry
from kolkit.session import GameSession

__all__ = [
    "BaseResource",
    "GameSession",
    "ResourceLoader",
    "ResourceRegistry",
    "__version__",
    "load_resources",
    "setup_logging",
    "settings",
]
