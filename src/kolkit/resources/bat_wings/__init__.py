"""Bat wings: daily bat skills, free fights and a bridge skip."""

from kolkit.resources.bat_wings.resource import BatWingsResource

__all__ = ["BatWingsResource"]
