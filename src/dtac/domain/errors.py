"""Exceptions raised while loading game constants.

Only subclasses of :class:`GameConstantsError` are meant to be handled by
callers.  Contract violations (a missing file, a matrix lookup for a pair that
was never built) surface as the built-in ``FileNotFoundError`` and ``KeyError``.
"""

from __future__ import annotations

from .enums import GameMode, TypeCategory


class GameConstantsError(Exception):
    """Base class for every user-facing constants loading failure."""


class ConstantsFileError(GameConstantsError):
    """The constants document could not be read or is not well-formed."""


class ConstantsParseError(GameConstantsError):
    """A section's text does not follow the expected structure."""


class HardcodedTypeError(GameConstantsError):
    """Base class for failures of the hardcoded-type validation."""


class NoGameModeError(HardcodedTypeError):
    def __init__(self) -> None:
        super().__init__("No game mode was set.")


class UnknownGameModeError(HardcodedTypeError):
    def __init__(self, game_mode: object, message: str | None = None) -> None:
        super().__init__(
            message or f"No hardcoded types are registered for game mode {game_mode!r}."
        )
        self.game_mode = game_mode


class MissingHardcodedTypeError(HardcodedTypeError):
    """A type required by the game engine is absent from the constants file."""

    def __init__(self, category: TypeCategory, type_name: str, game_mode: GameMode) -> None:
        super().__init__(
            f'The required {category} type "{type_name}" was not found in the provided '
            f"GameConstants file."
        )
        self.category = category
        self.type_name = type_name
        self.game_mode = game_mode
