"""Parsers turning GameConstants section text into domain values.

Section bodies are free-form lists: entries may be separated by commas,
whitespace or line breaks, in any combination::

    <Damage_Types>
        Damage_Default,
        Damage_Fire, Damage_Ion
    </Damage_Types>

    <Damage_To_Armor_Mod> Damage_Ion, Armor_Light, 0.25 </Damage_To_Armor_Mod>
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import TypeVar

from .errors import ConstantsParseError
from .models import Armour, Damage, DamageToArmourModifier

_SEPARATORS = re.compile(r"[\s,]+")

T = TypeVar("T")


def tokenize(text: str | None) -> list[str]:
    """Split a section body into its non-empty tokens."""

    if not text:
        return []
    return [token for token in _SEPARATORS.split(text) if token]


def _parse_names(text: str | None, factory: Callable[[str], T]) -> list[T]:
    return [factory(token) for token in tokenize(text)]


def parse_damage_types(text: str | None) -> list[Damage]:
    """Parse a ``Damage_Types`` body; duplicates are kept for the caller to report."""

    return _parse_names(text, Damage)


def parse_armour_types(text: str | None) -> list[Armour]:
    """Parse an ``Armor_Types`` body; duplicates are kept for the caller to report."""

    return _parse_names(text, Armour)


def parse_factor(token: str) -> float:
    try:
        factor = float(token)
    except ValueError as exc:
        raise ConstantsParseError(f"damage-to-armour factor {token!r} is not a number") from exc
    if not math.isfinite(factor) or factor < 0:
        raise ConstantsParseError(
            f"damage-to-armour factor {token!r} must be a finite, non-negative number"
        )
    return factor


def parse_damage_to_armour_modifiers(text: str | None) -> list[DamageToArmourModifier]:
    """Parse a ``Damage_To_Armor_Mod`` body into ``(damage, armour, factor)`` records.

    The body is a flat sequence of triples.  The game ships one triple per
    element, but several triples in one element are accepted and returned in
    order.

    Raises:
        ConstantsParseError: If the token count is not a multiple of three or a
            factor is not a finite, non-negative number.
    """

    tokens = tokenize(text)
    if len(tokens) % 3:
        raise ConstantsParseError(
            f"expected damage, armour, factor triples but found {len(tokens)} values: "
            f"{' '.join(tokens)!r}"
        )

    modifiers: list[DamageToArmourModifier] = []
    for index in range(0, len(tokens), 3):
        damage_name, armour_name, factor = tokens[index : index + 3]
        modifiers.append(
            DamageToArmourModifier(
                damage=Damage(damage_name),
                armour=Armour(armour_name),
                factor=parse_factor(factor),
            )
        )
    return modifiers
