"""Default settings for kolkit.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from kolkit.conf import global_settings

    LOG_LEVEL = "DEBUG"
    INSTALLED_RESOURCES = [
        *global_settings.INSTALLED_RESOURCES,
        "myproject.resources.cargo_shorts",
    ]
"""

# Logging settings
LOG_LEVEL = "INFO"
"""Level used by setup_logging() when none is passed explicitly."""

# Pantogram settings
PANTOGRAM_ITEM_ID = 9573
"""Item number of the portable pantogram, used to open its configuration choice."""

PANTOGRAM_CHOICE_ID = 1270
"""Choice adventure number that receives the encoded pants selection."""

# Installed resources (like Django's INSTALLED_APPS)
INSTALLED_RESOURCES = [
    "kolkit.resources.bat_wings",
    "kolkit.resources.crepe_parachute",
    "kolkit.resources.pantogram",
    "kolkit.resources.source_terminal",
    "kolkit.resources.stillsuit",
]
"""List of module paths to import for resource registration.

Example:
    INSTALLED_RESOURCES = [
        *global_settings.INSTALLED_RESOURCES,
        "myproject.resources.garbage_tote",
    ]
"""
