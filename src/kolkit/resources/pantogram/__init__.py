"""Portable pantogram: configurable pants built from five modifier slots."""

from kolkit.resources.pantogram.resolver import (
    CompleteSelection,
    EncodedSelection,
    PartialSelection,
    compute_encoded_selection,
    compute_requirements,
)
from kolkit.resources.pantogram.resource import PantogramResource
from kolkit.resources.pantogram.tables import (
    Alignment,
    Component,
    Element,
    LeftSacrifice,
    MiddleSacrifice,
    NoComponent,
    RightSacrifice,
    SlotCost,
)

__all__ = [
    "Alignment",
    "CompleteSelection",
    "Component",
    "Element",
    "EncodedSelection",
    "LeftSacrifice",
    "MiddleSacrifice",
    "NoComponent",
    "PantogramResource",
    "PartialSelection",
    "RightSacrifice",
    "SlotCost",
    "compute_encoded_selection",
    "compute_requirements",
]
