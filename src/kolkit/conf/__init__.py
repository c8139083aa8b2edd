"""Settings for kolkit scripts.

Defaults live in kolkit.conf.global_settings. A script may override any of
them, or add its own, from an importable module named by the
KOLKIT_SETTINGS_MODULE environment variable ("settings" if unset):

    # settings.py
    from kolkit.conf import global_settings

    LOG_LEVEL = "DEBUG"
    INSTALLED_RESOURCES = [*global_settings.INSTALLED_RESOURCES, "myscript.garbage_tote"]

Only uppercase names are read.
"""

import importlib
import logging
import os
from types import ModuleType
from typing import Any

from kolkit.conf import global_settings

logger = logging.getLogger(__name__)


def _copy_uppercase(module: ModuleType, target: object) -> None:
    for name in dir(module):
        if name.isupper():
            setattr(target, name, getattr(module, name))


class Settings:
    """Plain attribute bag seeded with the defaults."""

    def __init__(self) -> None:
        """Copy every default from global_settings."""
        _copy_uppercase(global_settings, self)


class LazySettings:
    """Proxy that reads the settings module the first time a setting is used."""

    def __init__(self) -> None:
        """Start unloaded."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        module_name = os.environ.get("KOLKIT_SETTINGS_MODULE", "settings")
        self._wrapped = Settings()
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            logger.debug("No settings module %r, using defaults", module_name)
            return
        _copy_uppercase(module, self._wrapped)

    def _loaded(self) -> Settings:
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        return getattr(self._loaded(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._loaded(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Set settings directly, skipping the settings module if not loaded yet.

        Example:
            settings.configure(LOG_LEVEL="WARNING", PANTOGRAM_CHOICE_ID=1270)
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
