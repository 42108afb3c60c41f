"""Value types and registries for damage, armour and their effectiveness matrix.

Damage and armour types are identified by name.  The game engine matches names
case-insensitively, so equality and hashing use the case-folded name while the
original spelling is kept for display.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True, slots=True, eq=False)
class _NamedType:
    name: str

    @property
    def key(self) -> str:
        return self.name.casefold()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.key))

    def __str__(self) -> str:
        return self.name


class Damage(_NamedType):
    """A damage type declared in ``Damage_Types``."""

    __slots__ = ()


class Armour(_NamedType):
    """An armour type declared in ``Armor_Types``."""

    __slots__ = ()


@dataclass(slots=True)
class DamageToArmour:
    """Effectiveness of one damage type against one armour type."""

    DEFAULT_FACTOR = 1.0

    damage: Damage
    armour: Armour
    factor: float = DEFAULT_FACTOR

    @property
    def pair(self) -> tuple[Damage, Armour]:
        return self.damage, self.armour


@dataclass(frozen=True, slots=True)
class DamageToArmourModifier:
    """Factor override parsed from a ``Damage_To_Armor_Mod`` section."""

    damage: Damage
    armour: Armour
    factor: float


T = TypeVar("T")


class TypeRegistry(Generic[T]):
    """Insertion-ordered set of domain values keyed by equality."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """Insert ``item``; return ``False`` when an equal value is already present."""

        if item in self._items:
            return False
        self._items[item] = None
        return True

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class DamageToArmourMatrix:
    """Matrix entries keyed by their ``(damage, armour)`` pair, in insertion order."""

    def __init__(self) -> None:
        self._entries: dict[tuple[Damage, Armour], DamageToArmour] = {}

    def add(self, entry: DamageToArmour) -> None:
        if entry.pair in self._entries:
            raise ValueError(f"matrix already holds an entry for {entry.damage}/{entry.armour}")
        self._entries[entry.pair] = entry

    def get(self, damage: Damage, armour: Armour) -> DamageToArmour:
        """Return the entry for a pair; ``KeyError`` if the pair was never built."""

        return self._entries[(damage, armour)]

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, pair: object) -> bool:
        return pair in self._entries

    def __iter__(self) -> Iterator[DamageToArmour]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
