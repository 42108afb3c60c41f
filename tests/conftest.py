"""Pytest configuration to ensure the `src` package layout is importable.

This adds `src/` and the project root to `sys.path` so tests can import the
`dtac` package (e.g., `from dtac.api.app import create_app`) and the root
`main.py` without requiring an editable install in CI.  It also provides
helpers for writing GameConstants files to a temporary directory.
"""

import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

ROOT_PATH = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT_PATH / "src"
for path in (ROOT_PATH, SRC_PATH):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dtac.domain.enums import GameMode  # noqa: E402
from dtac.domain.hardcoded import HardcodedTypeRegistry, HardcodedTypeSet  # noqa: E402


def constants_xml(
    damage: Iterable[str] | None = (),
    armour: Iterable[str] | None = (),
    modifiers: Iterable[tuple[str, str, float]] = (),
) -> str:
    """Render a minimal GameConstants document; ``None`` omits a section."""

    parts = ["<?xml version=\"1.0\"?>", "<GameConstants>"]
    if damage is not None:
        parts.append(f"  <Damage_Types>{', '.join(damage)}</Damage_Types>")
    if armour is not None:
        parts.append(f"  <Armor_Types>{', '.join(armour)}</Armor_Types>")
    for damage_name, armour_name, factor in modifiers:
        parts.append(
            f"  <Damage_To_Armor_Mod>{damage_name}, {armour_name}, {factor}</Damage_To_Armor_Mod>"
        )
    parts.append("</GameConstants>")
    return "\n".join(parts)


KINETIC_HARDCODED = HardcodedTypeRegistry(
    {
        GameMode.EAW: HardcodedTypeSet.from_names(
            damage=("Kinetic", "Energy"), armour=("Light", "Heavy")
        ),
        GameMode.FOC: HardcodedTypeSet.from_names(damage=("Kinetic",), armour=("Light",)),
    }
)


@pytest.fixture
def write_constants(tmp_path):
    """Return a function writing a constants document and returning its path."""

    def _write(text: str, name: str = "GameConstants.xml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
