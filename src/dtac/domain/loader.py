"""Load-parse-validate-populate pipeline for GameConstants documents.

The pipeline runs in a fixed order, each step finishing before the next one
starts:

1. Clear the store if a previous load completed.
2. Parse ``Damage_Types``, populate the damage registry and check the
   hardcoded damage types of the active game mode.
3. Same for ``Armor_Types``.
4. Build the damage x armour matrix with the default factor and overlay every
   ``Damage_To_Armor_Mod`` entry.
5. Mark the store as loaded.

Steps report failures as :class:`~dtac.domain.results.LoadFailure` values.
The orchestrator stops at the first one and leaves ``store.loaded`` false.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from dtac.interfaces.document import IConstantsDocument

from .enums import SectionTag, TypeCategory
from .errors import ConstantsFileError, ConstantsParseError
from .hardcoded import DEFAULT_HARDCODED_TYPES, HardcodedTypeRegistry, check_hardcoded_types
from .models import Armour, Damage, DamageToArmour, TypeRegistry
from .parsing import parse_armour_types, parse_damage_to_armour_modifiers, parse_damage_types
from .results import LoadFailure, LoadReport
from .store import ConstantsStore

logger = logging.getLogger(__name__)

T = TypeVar("T", Damage, Armour)


# ---------------------------------------------------------------------------
# Registry population


def populate_registry(
    registry: TypeRegistry[T], values: Iterable[T], category: TypeCategory
) -> list[str]:
    """Insert ``values`` in order, skipping and warning about duplicates.

    Returns the names of the skipped duplicates.
    """

    duplicates: list[str] = []
    for value in values:
        if registry.add(value):
            continue
        logger.warning(
            'duplicate %s type definition "%s" ignored; it was previously defined',
            category,
            value.name,
        )
        duplicates.append(value.name)
    return duplicates


def _load_types(
    document: IConstantsDocument,
    registry: TypeRegistry[T],
    tag: SectionTag,
    parse: Callable[[str | None], list[T]],
    category: TypeCategory,
) -> list[str]:
    text = document.find_section(tag)
    if text is None:
        logger.info("no %s section found; no %s types loaded", tag, category)
    return populate_registry(registry, parse(text), category)


def load_damage_types(
    document: IConstantsDocument,
    store: ConstantsStore,
    hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    report: LoadReport | None = None,
) -> LoadFailure | None:
    """Populate the damage registry and check the required damage types."""

    duplicates = _load_types(
        document, store.damage, SectionTag.DAMAGE_TYPES, parse_damage_types, TypeCategory.DAMAGE
    )
    if report is not None:
        report.damage_types = len(store.damage)
        report.duplicate_damage_types.extend(duplicates)
    return check_hardcoded_types(store.damage, TypeCategory.DAMAGE, store.game_mode, hardcoded)


def load_armour_types(
    document: IConstantsDocument,
    store: ConstantsStore,
    hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    report: LoadReport | None = None,
) -> LoadFailure | None:
    """Populate the armour registry and check the required armour types."""

    duplicates = _load_types(
        document, store.armour, SectionTag.ARMOUR_TYPES, parse_armour_types, TypeCategory.ARMOUR
    )
    if report is not None:
        report.armour_types = len(store.armour)
        report.duplicate_armour_types.extend(duplicates)
    return check_hardcoded_types(store.armour, TypeCategory.ARMOUR, store.game_mode, hardcoded)


# ---------------------------------------------------------------------------
# Damage-to-armour matrix


def build_damage_to_armour_matrix(store: ConstantsStore) -> int:
    """Create one default entry per damage/armour pair; return the entry count."""

    for damage in store.damage:
        for armour in store.armour:
            store.damage_to_armour.add(DamageToArmour(damage, armour))
    return len(store.damage_to_armour)


def apply_damage_to_armour_modifiers(document: IConstantsDocument, store: ConstantsStore) -> int:
    """Overlay every modifier section on the matrix in document order.

    A later modifier for the same pair overwrites an earlier one.  A modifier
    naming a type that is not registered has no matrix entry and raises
    ``KeyError``.
    """

    applied = 0
    for text in document.iter_sections(SectionTag.DAMAGE_TO_ARMOUR_MOD):
        for modifier in parse_damage_to_armour_modifiers(text):
            entry = store.damage_to_armour.get(modifier.damage, modifier.armour)
            logger.debug(
                "damage-to-armour %s/%s: %s -> %s",
                entry.damage,
                entry.armour,
                entry.factor,
                modifier.factor,
            )
            entry.factor = modifier.factor
            applied += 1
    return applied


# ---------------------------------------------------------------------------
# Orchestration


def try_load_document(
    document: IConstantsDocument,
    store: ConstantsStore,
    *,
    hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    report: LoadReport | None = None,
) -> LoadReport:
    """Run the full pipeline over ``document`` and report the outcome.

    Domain failures are returned on ``report.failure`` rather than raised.
    Contract violations (a modifier for a pair that was never built) still
    propagate.
    """

    if report is None:
        report = LoadReport(source=getattr(document, "source", None), game_mode=store.game_mode)

    with store.lock:
        if store.loaded:
            logger.info("constants already loaded; clearing registries before reload")
        # A failed load can leave partial registries behind without setting the flag.
        store.clear_all()

        try:
            for step in (load_damage_types, load_armour_types):
                failure = step(document, store, hardcoded, report)
                if failure is not None:
                    report.failure = failure
                    return report

            report.matrix_entries = build_damage_to_armour_matrix(store)
            report.modifiers_applied = apply_damage_to_armour_modifiers(document, store)
        except (ConstantsParseError, ConstantsFileError) as exc:
            logger.critical("could not parse constants: %s", exc)
            report.failure = LoadFailure.from_exception(exc)
            return report

        store.loaded = True

    logger.info(
        "loaded %d damage types, %d armour types, %d matrix entries (%d modifiers)",
        report.damage_types,
        report.armour_types,
        report.matrix_entries,
        report.modifiers_applied,
    )
    return report


def load_document(
    document: IConstantsDocument,
    store: ConstantsStore,
    *,
    hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
) -> LoadReport:
    """Run the pipeline and raise the matching ``GameConstantsError`` on failure."""

    report = try_load_document(document, store, hardcoded=hardcoded)
    if report.failure is not None:
        raise report.failure.to_exception()
    return report
