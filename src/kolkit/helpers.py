"""Helper functions for wiring kolkit into a script.

Scripts can either call load_resources() to get a ready loader, or set up
logging and a ResourceLoader themselves for more control.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from kolkit.conf import settings
from kolkit.resources.loader import ResourceLoader

if TYPE_CHECKING:
    from kolkit.session import GameSession


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for scripts using kolkit.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def load_resources(session: GameSession) -> ResourceLoader:
    """Create a loader with every installed resource bound to `session`.

    Side effects:
        - Configures logging via setup_logging()
        - Imports every module in settings.INSTALLED_RESOURCES

    Example:
        >>> loader = load_resources(MySession())
        >>> loader.owned()
        ['pantogram', 'stillsuit']
    """
    setup_logging()
    loader = ResourceLoader(session)
    loader.instantiate_all()
    return loader
