"""Command line entry point: load a GameConstants file and print its matrix."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dtac.domain.enums import GameMode
from dtac.domain.store import ConstantsSnapshot, ConstantsStore
from dtac.services.constants_service import try_load_game_constants

_PLAYABLE_MODES = [mode.value for mode in GameMode if mode is not GameMode.UNDEFINED]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dtac", description="Load a GameConstants.xml file and print its damage matrix"
    )
    parser.add_argument("path", help="Path to GameConstants.xml")
    parser.add_argument(
        "--mode",
        choices=_PLAYABLE_MODES,
        default=GameMode.FOC.value,
        help="Game mode whose hardcoded types are enforced",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser


def format_matrix(snapshot: ConstantsSnapshot) -> str:
    """Render the matrix as a table with one row per damage type."""

    header = ["Damage \\ Armour", *(armour.name for armour in snapshot.armour)]
    rows = [header]
    for damage in snapshot.damage:
        rows.append(
            [damage.name, *(f"{snapshot.factor(damage, armour):g}" for armour in snapshot.armour)]
        )
    widths = [max(len(row[col]) for row in rows) for col in range(len(header))]
    return "\n".join(
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths, strict=True)).rstrip()
        for row in rows
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    store = ConstantsStore(game_mode=GameMode(args.mode))
    try:
        report = try_load_game_constants(args.path, store)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyError as exc:
        print(f"error: no matrix entry for {exc}", file=sys.stderr)
        return 1
    if report.failure is not None:
        print(f"error: {report.failure.message}", file=sys.stderr)
        return 1

    snapshot = store.snapshot()
    print(
        f"{report.damage_types} damage types, {report.armour_types} armour types, "
        f"{report.matrix_entries} matrix entries ({report.modifiers_applied} modifiers)"
    )
    print(format_matrix(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())
