"""dtac: load damage and armour balance constants from GameConstants files.

Usage:
    from dtac import ConstantsStore, GameMode, load_game_constants

    store = ConstantsStore(game_mode=GameMode.FOC)
    load_game_constants("Data/XML/GameConstants.xml", store)
    store.damage_to_armour.get(Damage("Damage_Ion"), Armour("Armor_Light")).factor
"""

__version__ = "0.1.0"

from dtac.domain.enums import GameMode, LoadErrorKind, TypeCategory
from dtac.domain.errors import (
    ConstantsFileError,
    ConstantsParseError,
    GameConstantsError,
    HardcodedTypeError,
    MissingHardcodedTypeError,
    NoGameModeError,
    UnknownGameModeError,
)
from dtac.domain.hardcoded import (
    DEFAULT_HARDCODED_TYPES,
    HardcodedTypeRegistry,
    HardcodedTypeSet,
)
from dtac.domain.models import Armour, Damage, DamageToArmour, DamageToArmourModifier
from dtac.domain.results import LoadFailure, LoadReport
from dtac.domain.store import ConstantsSnapshot, ConstantsStore
from dtac.services.constants_service import (
    ConstantsService,
    load_game_constants,
    try_load_game_constants,
)

__all__ = [
    "__version__",
    # Domain values
    "Armour",
    "Damage",
    "DamageToArmour",
    "DamageToArmourModifier",
    "GameMode",
    "TypeCategory",
    # Store
    "ConstantsSnapshot",
    "ConstantsStore",
    # Hardcoded types
    "DEFAULT_HARDCODED_TYPES",
    "HardcodedTypeRegistry",
    "HardcodedTypeSet",
    # Loading
    "ConstantsService",
    "LoadErrorKind",
    "LoadFailure",
    "LoadReport",
    "load_game_constants",
    "try_load_game_constants",
    # Errors
    "ConstantsFileError",
    "ConstantsParseError",
    "GameConstantsError",
    "HardcodedTypeError",
    "MissingHardcodedTypeError",
    "NoGameModeError",
    "UnknownGameModeError",
]
