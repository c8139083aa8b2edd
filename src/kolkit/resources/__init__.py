"""Pluggable item resources.

Each subpackage wraps one item and registers a BaseResource subclass with
the ResourceRegistry. The ResourceLoader imports the modules listed in
settings.INSTALLED_RESOURCES and binds every registered resource to a
GameSession.

Example:
    from kolkit.resources import ResourceLoader

    loader = ResourceLoader(session)
    loader.instantiate_all()
    if "stillsuit" in loader.owned():
        loader.get("stillsuit").drink_distillate()
"""

from kolkit.resources.base import BaseResource
from kolkit.resources.loader import ResourceLoader
from kolkit.resources.registry import ResourceRegistry

__all__ = [
    "BaseResource",
    "ResourceLoader",
    "ResourceRegistry",
]
