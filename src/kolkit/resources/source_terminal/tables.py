"""What the Source Terminal can hand out."""

from enum import Enum


class Buff(Enum):
    """Buffs that can be acquired from enhance."""

    # +30% Item Drop
    ITEMS = "items.enh"
    # +60% Meat Drop
    MEAT = "meat.enh"
    # +50% Initiative
    INIT = "init.enh"
    # +10% chance of Critical Hit, +10% chance of Spell Critical Hit
    CRITICAL = "critical.enh"
    # +5 Prismatic Damage
    DAMAGE = "damage.enh"
    # +3 Stats Per Fight
    SUBSTATS = "substats.enh"


class RolloverBuff(Enum):
    """Rollover buffs that can be acquired from enquiry."""

    # +5 Familiar Weight
    FAMILIAR = "familiar.enq"
    # +25 ML
    MONSTERS = "monsters.enq"
    # +5 Prismatic Resistance
    PROTECT = "protect.enq"
    # +100% Muscle, +100% Mysticality, +100% Moxie
    STATS = "stats.enq"


class Skill(Enum):
    """Skills that can be learned from educate."""

    # Collect Source essence from enemies once per combat
    EXTRACT = "Extract"
    # Stagger and create a wandering monster 1-3 times per day
    DIGITIZE = "Digitize"
    # Stagger and deal 25% of enemy HP in damage once per combat
    COMPRESS = "Compress"
    # Double monster's HP, attack, defence, attacks per round and item drops
    DUPLICATE = "Duplicate"
    # Causes a government agent wanderer next turn
    PORTSCAN = "Portscan"
    # Increase Max MP by 100% and recover 1000 MP, 30 turn cooldown
    TURBO = "Turbo"


class TerminalItem(Enum):
    """Items that can be generated by extrude."""

    # 4 fullness EPIC food
    BROWSER_COOKIE = "browser cookie"
    # 4 potency EPIC booze
    HACKED_GIBSON = "hacked gibson"
    # +10% item drop, improved yield from extraction
    SHADES = "Source shades"
    GRAM = "Source terminal GRAM chip"
    PRAM = "Source terminal PRAM chip"
    SPAM = "Source terminal SPAM chip"
    CRAM = "Source terminal CRAM chip"
    DRAM = "Source terminal DRAM chip"
    # Raises maximum daily Digitize casts by one, usable once per player
    TRAM = "Source terminal TRAM chip"
    SOFTWARE_BUG = "software bug"


# Installed chips that each add one daily Digitize cast
DIGITIZE_CHIPS = ("TRAM", "TRIGRAM")

EDUCATE_PROPERTIES = ("sourceTerminalEducate1", "sourceTerminalEducate2")

MAX_EDUCATED_SKILLS = 2
