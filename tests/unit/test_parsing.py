"""Tests for the section text parsers."""

from __future__ import annotations

import pytest

from dtac.domain.errors import ConstantsParseError
from dtac.domain.models import Armour, Damage, DamageToArmourModifier
from dtac.domain.parsing import (
    parse_armour_types,
    parse_damage_to_armour_modifiers,
    parse_damage_types,
    parse_factor,
    tokenize,
)


class TestTokenize:
    def test_mixed_separators(self):
        text = "\n\t Damage_Default,\n  Damage_Fire ,Damage_Ion\n\n"
        assert tokenize(text) == ["Damage_Default", "Damage_Fire", "Damage_Ion"]

    def test_empty_and_missing_text(self):
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize(" ,, \n ") == []


def test_parse_damage_types_keeps_order_and_duplicates():
    damages = parse_damage_types("Kinetic, Energy, kinetic")
    assert damages == [Damage("Kinetic"), Damage("Energy"), Damage("Kinetic")]
    assert [damage.name for damage in damages] == ["Kinetic", "Energy", "kinetic"]


def test_parse_armour_types():
    assert parse_armour_types("Light\nHeavy") == [Armour("Light"), Armour("Heavy")]


def test_parse_single_modifier():
    assert parse_damage_to_armour_modifiers(" Kinetic, Heavy, 0.5 ") == [
        DamageToArmourModifier(Damage("Kinetic"), Armour("Heavy"), 0.5)
    ]


def test_parse_several_modifiers_in_order():
    modifiers = parse_damage_to_armour_modifiers("Kinetic, Heavy, 0.5\nEnergy, Light, 2")
    assert [(m.damage.name, m.armour.name, m.factor) for m in modifiers] == [
        ("Kinetic", "Heavy", 0.5),
        ("Energy", "Light", 2.0),
    ]


def test_parse_modifiers_rejects_incomplete_triple():
    with pytest.raises(ConstantsParseError, match="triples"):
        parse_damage_to_armour_modifiers("Kinetic, Heavy")


@pytest.mark.parametrize("token", ["fast", "-0.5", "nan", "inf"])
def test_parse_factor_rejects_invalid_values(token):
    with pytest.raises(ConstantsParseError):
        parse_factor(token)


def test_parse_factor_accepts_zero_and_exponent():
    assert parse_factor("0") == 0.0
    assert parse_factor("1.5e-1") == pytest.approx(0.15)
