"""Development entrypoint serving a GameConstants file over HTTP."""

from __future__ import annotations

import argparse
import os
from collections.abc import MutableMapping, Sequence
from pathlib import Path

import uvicorn

from dtac.config import get_settings
from dtac.domain.enums import GameMode

APP_TARGET = "dtac.api.app:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve damage-to-armour constants over HTTP")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument("--reload", action="store_true", help="Enable autoreload (dev mode)")
    parser.add_argument(
        "--constants", type=Path, help="GameConstants.xml to load when the API starts"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode if mode is not GameMode.UNDEFINED],
        help="Game mode whose hardcoded types are enforced",
    )
    parser.add_argument("--log-level", help="Logging level for the dtac loggers")
    return parser


def export_settings(
    args: argparse.Namespace, environ: MutableMapping[str, str] = os.environ
) -> None:
    """Expose command line overrides as ``DTAC_*`` variables for the app's settings.

    The app is imported by uvicorn (and by its reloader subprocess) after this
    runs, so the startup load sees the overrides.
    """

    if args.constants is not None:
        environ["DTAC_GAME_CONSTANTS_PATH"] = str(args.constants.resolve())
    if args.mode is not None:
        environ["DTAC_GAME_MODE"] = args.mode
    if args.log_level is not None:
        environ["DTAC_LOG_LEVEL"] = args.log_level
    get_settings.cache_clear()


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.constants is not None and not args.constants.is_file():
        parser.error(f"not a file: '{args.constants}'")
    export_settings(args)

    uvicorn.run(APP_TARGET, host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
