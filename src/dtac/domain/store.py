"""Caller-owned store holding the loaded damage, armour and matrix registries."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import GameMode
from .models import (
    Armour,
    Damage,
    DamageToArmour,
    DamageToArmourMatrix,
    TypeRegistry,
)


@dataclass(frozen=True, slots=True)
class ConstantsSnapshot:
    """Immutable copy of a store taken under its lock."""

    loaded: bool
    game_mode: GameMode
    damage: tuple[Damage, ...]
    armour: tuple[Armour, ...]
    factors: Mapping[tuple[Damage, Armour], float]

    def factor(self, damage: Damage, armour: Armour) -> float:
        return self.factors[(damage, armour)]

    def entries(self) -> list[DamageToArmour]:
        return [DamageToArmour(d, a, factor) for (d, a), factor in self.factors.items()]


class ConstantsStore:
    """Registries populated by a constants load.

    The store replaces process-wide state: callers create one, pass it to the
    loader and share it with readers.  ``lock`` is held by the loader for the
    whole load, so :meth:`snapshot` never sees a half-populated store.
    """

    def __init__(self, game_mode: GameMode = GameMode.UNDEFINED) -> None:
        self.damage: TypeRegistry[Damage] = TypeRegistry()
        self.armour: TypeRegistry[Armour] = TypeRegistry()
        self.damage_to_armour = DamageToArmourMatrix()
        self.loaded = False
        self.game_mode = game_mode
        self.lock = threading.RLock()

    def clear_all(self) -> None:
        """Empty every registry and forget the previous load."""

        with self.lock:
            self.damage.clear()
            self.armour.clear()
            self.damage_to_armour.clear()
            self.loaded = False

    def snapshot(self) -> ConstantsSnapshot:
        with self.lock:
            return ConstantsSnapshot(
                loaded=self.loaded,
                game_mode=self.game_mode,
                damage=tuple(self.damage),
                armour=tuple(self.armour),
                factors=MappingProxyType(
                    {entry.pair: entry.factor for entry in self.damage_to_armour}
                ),
            )
