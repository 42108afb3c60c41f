"""Enumerations shared by the game-constants domain."""

from __future__ import annotations

from enum import StrEnum


class GameMode(StrEnum):
    """Ruleset the constants file is loaded for."""

    EAW = "eaw"
    FOC = "foc"
    UNDEFINED = "undefined"


class TypeCategory(StrEnum):
    """Category a required hardcoded type belongs to."""

    DAMAGE = "damage"
    ARMOUR = "armour"


class SectionTag(StrEnum):
    """Top-level tags read from a GameConstants document."""

    DAMAGE_TYPES = "Damage_Types"
    ARMOUR_TYPES = "Armor_Types"
    DAMAGE_TO_ARMOUR_MOD = "Damage_To_Armor_Mod"


class LoadErrorKind(StrEnum):
    """Reasons a constants load can fail."""

    NO_GAME_MODE = "no_game_mode"
    UNKNOWN_GAME_MODE = "unknown_game_mode"
    MISSING_DAMAGE_TYPE = "missing_damage_type"
    MISSING_ARMOUR_TYPE = "missing_armour_type"
    MALFORMED_SECTION = "malformed_section"
    MALFORMED_DOCUMENT = "malformed_document"
