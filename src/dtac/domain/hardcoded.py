"""Damage and armour types the game engine requires by name.

Each playable game mode maps to a :class:`HardcodedTypeSet`.  The registry is
checked for exhaustiveness when it is built, so a mode added to
:class:`~dtac.domain.enums.GameMode` without a matching set fails at import
time rather than halfway through a load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import GameMode, TypeCategory
from .models import Armour, Damage, TypeRegistry
from .results import LoadFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HardcodedTypeSet:
    """Required damage and armour types for one game mode."""

    damage: tuple[Damage, ...] = ()
    armour: tuple[Armour, ...] = ()

    @classmethod
    def from_names(
        cls, damage: Iterable[str] = (), armour: Iterable[str] = ()
    ) -> HardcodedTypeSet:
        return cls(
            damage=tuple(Damage(name) for name in damage),
            armour=tuple(Armour(name) for name in armour),
        )

    def types_for(self, category: TypeCategory) -> tuple[Damage, ...] | tuple[Armour, ...]:
        return self.damage if category is TypeCategory.DAMAGE else self.armour


class HardcodedTypeRegistry:
    """Lookup from game mode to the types that mode requires."""

    def __init__(self, sets: Mapping[GameMode, HardcodedTypeSet]) -> None:
        missing = [
            mode for mode in GameMode if mode is not GameMode.UNDEFINED and mode not in sets
        ]
        if missing:
            names = ", ".join(mode.name for mode in missing)
            raise ValueError(f"no hardcoded type set registered for game mode(s): {names}")
        if GameMode.UNDEFINED in sets:
            raise ValueError("the undefined game mode cannot carry hardcoded types")
        self._sets = MappingProxyType(dict(sets))

    def for_mode(self, game_mode: GameMode) -> HardcodedTypeSet | LoadFailure:
        """Return the set for ``game_mode`` or the failure explaining why there is none."""

        if game_mode == GameMode.UNDEFINED:
            return LoadFailure.no_game_mode()
        try:
            return self._sets[game_mode]
        except (KeyError, TypeError):
            return LoadFailure.unknown_game_mode(game_mode)

    def __getitem__(self, game_mode: GameMode) -> HardcodedTypeSet:
        return self._sets[game_mode]


def check_hardcoded_types(
    registry: TypeRegistry[Damage] | TypeRegistry[Armour],
    category: TypeCategory,
    game_mode: GameMode,
    hardcoded: HardcodedTypeRegistry,
) -> LoadFailure | None:
    """Confirm every required type of ``category`` is present in ``registry``.

    Stops at the first missing type; the remaining required types are not
    examined.
    """

    required = hardcoded.for_mode(game_mode)
    if isinstance(required, LoadFailure):
        logger.critical(required.message)
        return required

    for hardcoded_type in required.types_for(category):
        if hardcoded_type in registry:
            continue
        failure = LoadFailure.missing_type(category, hardcoded_type.name, game_mode)
        logger.critical(failure.message)
        return failure
    return None


EAW_HARDCODED_TYPES = HardcodedTypeSet.from_names(
    damage=("Damage_Default",),
    armour=("Armor_Default",),
)

FOC_HARDCODED_TYPES = HardcodedTypeSet.from_names(
    damage=("Damage_Default",),
    armour=("Armor_Default",),
)

DEFAULT_HARDCODED_TYPES = HardcodedTypeRegistry(
    {
        GameMode.EAW: EAW_HARDCODED_TYPES,
        GameMode.FOC: FOC_HARDCODED_TYPES,
    }
)
