"""Tests for the load pipeline, driven by an in-memory document."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from conftest import KINETIC_HARDCODED

from dtac.domain.enums import GameMode, LoadErrorKind, TypeCategory
from dtac.domain.errors import (
    ConstantsParseError,
    MissingHardcodedTypeError,
    NoGameModeError,
)
from dtac.domain.loader import (
    apply_damage_to_armour_modifiers,
    build_damage_to_armour_matrix,
    load_document,
    populate_registry,
    try_load_document,
)
from dtac.domain.models import Armour, Damage, DamageToArmour, TypeRegistry
from dtac.domain.store import ConstantsStore


class FakeDocument:
    """Document built from ``(tag, text)`` pairs, matched case-insensitively."""

    def __init__(self, *sections: tuple[str, str]) -> None:
        self.sections = list(sections)

    def iter_sections(self, tag: str) -> Iterator[str]:
        for name, text in self.sections:
            if name.casefold() == tag.casefold():
                yield text

    def find_section(self, tag: str) -> str | None:
        return next(self.iter_sections(tag), None)


def _example_document(*modifiers: str) -> FakeDocument:
    return FakeDocument(
        ("Damage_Types", "Kinetic, Energy"),
        ("Armor_Types", "Light, Heavy"),
        *(("Damage_To_Armor_Mod", text) for text in modifiers),
    )


def _store(mode: GameMode = GameMode.EAW) -> ConstantsStore:
    return ConstantsStore(game_mode=mode)


def _factors(store: ConstantsStore) -> dict[tuple[str, str], float]:
    return {(e.damage.name, e.armour.name): e.factor for e in store.damage_to_armour}


class TestPopulateRegistry:
    def test_duplicates_are_skipped_with_one_warning_each(self, caplog):
        registry: TypeRegistry[Damage] = TypeRegistry()
        values = [Damage("Kinetic"), Damage("Energy"), Damage("KINETIC")]

        with caplog.at_level(logging.WARNING, logger="dtac"):
            duplicates = populate_registry(registry, values, TypeCategory.DAMAGE)

        assert [d.name for d in registry] == ["Kinetic", "Energy"]
        assert duplicates == ["KINETIC"]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert '"KINETIC"' in warnings[0].getMessage()
        assert "damage type" in warnings[0].getMessage()

    def test_armour_duplicates_are_named_as_armour(self, caplog):
        registry: TypeRegistry[Armour] = TypeRegistry([Armour("Light")])
        with caplog.at_level(logging.WARNING, logger="dtac"):
            populate_registry(registry, [Armour("Light")], TypeCategory.ARMOUR)
        assert "armour type" in caplog.text


class TestMatrix:
    def test_cross_product_in_registry_order(self):
        store = _store()
        store.damage.add(Damage("Kinetic"))
        store.damage.add(Damage("Energy"))
        store.armour.add(Armour("Light"))
        store.armour.add(Armour("Heavy"))

        assert build_damage_to_armour_matrix(store) == 4
        assert [(e.damage.name, e.armour.name) for e in store.damage_to_armour] == [
            ("Kinetic", "Light"),
            ("Kinetic", "Heavy"),
            ("Energy", "Light"),
            ("Energy", "Heavy"),
        ]
        assert all(e.factor == DamageToArmour.DEFAULT_FACTOR for e in store.damage_to_armour)

    def test_later_modifier_for_same_pair_wins(self):
        store = _store()
        store.damage.add(Damage("Kinetic"))
        store.armour.add(Armour("Heavy"))
        build_damage_to_armour_matrix(store)
        document = FakeDocument(
            ("Damage_To_Armor_Mod", "Kinetic, Heavy, 0.5"),
            ("Damage_To_Armor_Mod", "Kinetic, Heavy, 0.25"),
        )

        assert apply_damage_to_armour_modifiers(document, store) == 2
        assert store.damage_to_armour.get(Damage("Kinetic"), Armour("Heavy")).factor == 0.25

    def test_modifier_for_unregistered_type_is_a_lookup_error(self):
        store = _store()
        store.damage.add(Damage("Kinetic"))
        store.armour.add(Armour("Heavy"))
        build_damage_to_armour_matrix(store)
        document = FakeDocument(("Damage_To_Armor_Mod", "Plasma, Heavy, 0.5"))

        with pytest.raises(KeyError):
            apply_damage_to_armour_modifiers(document, store)


class TestTryLoadDocument:
    def test_example_scenario(self):
        store = _store()

        report = try_load_document(
            _example_document("Kinetic, Heavy, 0.5"), store, hardcoded=KINETIC_HARDCODED
        )

        assert report.ok
        assert store.loaded
        assert len(store.damage_to_armour) == 4
        assert _factors(store) == {
            ("Kinetic", "Light"): 1.0,
            ("Kinetic", "Heavy"): 0.5,
            ("Energy", "Light"): 1.0,
            ("Energy", "Heavy"): 1.0,
        }
        assert report.damage_types == 2
        assert report.armour_types == 2
        assert report.matrix_entries == 4
        assert report.modifiers_applied == 1

    def test_duplicate_types_are_reported_not_fatal(self, caplog):
        store = _store()
        document = FakeDocument(
            ("Damage_Types", "Kinetic, Energy, Kinetic"),
            ("Armor_Types", "Light, Heavy, heavy"),
        )

        with caplog.at_level(logging.WARNING, logger="dtac"):
            report = try_load_document(document, store, hardcoded=KINETIC_HARDCODED)

        assert report.ok
        assert len(store.damage) == 2
        assert len(store.armour) == 2
        assert report.duplicate_damage_types == ["Kinetic"]
        assert report.duplicate_armour_types == ["heavy"]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    def test_missing_required_damage_type_aborts_before_armour(self):
        store = _store()
        document = FakeDocument(("Damage_Types", "Kinetic"), ("Armor_Types", "Light, Heavy"))

        report = try_load_document(document, store, hardcoded=KINETIC_HARDCODED)

        assert report.failure is not None
        assert report.failure.kind is LoadErrorKind.MISSING_DAMAGE_TYPE
        assert report.failure.type_name == "Energy"
        assert not store.loaded
        assert len(store.armour) == 0
        assert len(store.damage_to_armour) == 0

    def test_missing_required_armour_type_aborts_before_matrix(self):
        store = _store()
        document = FakeDocument(("Damage_Types", "Kinetic, Energy"), ("Armor_Types", "Heavy"))

        report = try_load_document(document, store, hardcoded=KINETIC_HARDCODED)

        assert report.failure is not None
        assert report.failure.kind is LoadErrorKind.MISSING_ARMOUR_TYPE
        assert report.failure.type_name == "Light"
        assert not store.loaded
        assert len(store.damage_to_armour) == 0

    def test_missing_damage_section_fails_on_required_types(self):
        store = _store()
        document = FakeDocument(("Armor_Types", "Light, Heavy"))

        report = try_load_document(document, store, hardcoded=KINETIC_HARDCODED)

        assert report.failure is not None
        assert report.failure.kind is LoadErrorKind.MISSING_DAMAGE_TYPE
        assert report.failure.type_name == "Kinetic"

    def test_undefined_mode_fails_regardless_of_content(self, caplog):
        store = _store(GameMode.UNDEFINED)

        with caplog.at_level(logging.CRITICAL, logger="dtac"):
            report = try_load_document(_example_document(), store, hardcoded=KINETIC_HARDCODED)

        assert report.failure is not None
        assert report.failure.kind is LoadErrorKind.NO_GAME_MODE
        assert not store.loaded
        assert "No game mode was set." in caplog.text

    def test_game_mode_selects_required_set(self):
        store = _store(GameMode.FOC)
        document = FakeDocument(("Damage_Types", "Kinetic"), ("Armor_Types", "Light"))

        report = try_load_document(document, store, hardcoded=KINETIC_HARDCODED)

        assert report.ok
        assert len(store.damage_to_armour) == 1

    def test_malformed_modifier_is_reported(self):
        store = _store()

        report = try_load_document(
            _example_document("Kinetic, Heavy"), store, hardcoded=KINETIC_HARDCODED
        )

        assert report.failure is not None
        assert report.failure.kind is LoadErrorKind.MALFORMED_SECTION
        assert not store.loaded

    def test_reload_replaces_previous_content(self):
        store = _store()
        try_load_document(
            _example_document("Kinetic, Heavy, 0.5"), store, hardcoded=KINETIC_HARDCODED
        )

        second = FakeDocument(
            ("Damage_Types", "Energy, Kinetic"),
            ("Armor_Types", "Heavy, Light, Medium"),
        )
        report = try_load_document(second, store, hardcoded=KINETIC_HARDCODED)

        assert report.ok
        assert [d.name for d in store.damage] == ["Energy", "Kinetic"]
        assert [a.name for a in store.armour] == ["Heavy", "Light", "Medium"]
        assert len(store.damage_to_armour) == 6
        assert store.damage_to_armour.get(Damage("Kinetic"), Armour("Heavy")).factor == 1.0

    def test_failed_reload_clears_previous_load(self):
        store = _store()
        try_load_document(_example_document(), store, hardcoded=KINETIC_HARDCODED)
        assert store.loaded

        report = try_load_document(
            FakeDocument(("Damage_Types", "Energy")), store, hardcoded=KINETIC_HARDCODED
        )

        assert not report.ok
        assert not store.loaded
        assert len(store.damage_to_armour) == 0


class TestLoadDocument:
    def test_raises_missing_type_error(self):
        store = _store()
        with pytest.raises(MissingHardcodedTypeError) as excinfo:
            load_document(FakeDocument(), store, hardcoded=KINETIC_HARDCODED)
        assert excinfo.value.type_name == "Kinetic"
        assert excinfo.value.category is TypeCategory.DAMAGE
        assert not store.loaded

    def test_raises_no_game_mode_error(self):
        with pytest.raises(NoGameModeError):
            load_document(
                _example_document(), _store(GameMode.UNDEFINED), hardcoded=KINETIC_HARDCODED
            )

    def test_raises_parse_error(self):
        with pytest.raises(ConstantsParseError):
            load_document(
                _example_document("Kinetic, Heavy, lots"), _store(), hardcoded=KINETIC_HARDCODED
            )

    def test_returns_report_on_success(self):
        report = load_document(_example_document(), _store(), hardcoded=KINETIC_HARDCODED)
        assert report.ok
        assert report.source is None
