"""Crepe paper parachute cape: pick a monster to drop in on."""

from kolkit.resources.crepe_parachute.resource import CrepeParachuteResource

__all__ = ["CrepeParachuteResource"]
