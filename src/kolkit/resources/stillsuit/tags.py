"""Familiar tag to distillate modifier table.

Every familiar tag feeds exactly one modifier of the stillsuit distillate.
The "pokefam" tag marks familiars from the Pocket Familiars path and never
feeds anything.
"""

from types import MappingProxyType

EXCLUDED_TAGS = frozenset({"pokefam"})

MODIFIER_TAGS = MappingProxyType(
    {
        "mineral": "Muscle",
        "robot": "Muscle",
        "organic": "Muscle",
        "hasbones": "Muscle",
        "technological": "Mysticality",
        "orb": "Mysticality",
        "sentient": "Mysticality",
        "polygonal": "Mysticality",
        "software": "Mysticality",
        "cantalk": "Mysticality",
        "humanoid": "Moxie",
        "hashands": "Moxie",
        "cute": "Moxie",
        "good": "Moxie",
        "phallic": "Moxie",
        "animatedart": "Moxie",
        "person": "Moxie",
        "haseyes": "Item Drop",
        "object": "Item Drop",
        "haslegs": "Item Drop",
        "food": "Food Drop",
        "vegetable": "Food Drop",
        "edible": "Food Drop",
        "animal": "Damage Reduction",
        "insect": "Damage Reduction",
        "wearsclothes": "Damage Reduction",
        "isclothes": "Damage Reduction",
        "hasshell": "Damage Reduction",
        "haswings": "Initiative",
        "fast": "Initiative",
        "flies": "Initiative",
        "hovers": "Initiative",
        "swims": "Initiative",
        "aquatic": "Initiative",
        "spooky": "Spooky Damage",
        "undead": "Spooky Damage",
        "evil": "Spooky Damage",
        "reallyevil": "Spooky Damage",
        "hot": "Hot Damage",
        "cold": "Cold Damage",
        "sleaze": "Sleaze Damage",
        "stench": "Stench Damage",
        "bite": "Weapon Damage",
        "hasclaws": "Weapon Damage",
        "hasbeak": "Weapon Damage",
        "hasstinger": "Weapon Damage",
        "hard": "Weapon Damage",
    }
)
