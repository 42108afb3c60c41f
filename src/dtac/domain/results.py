"""Data structures returned by the constants loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .enums import GameMode, LoadErrorKind, TypeCategory
from .errors import (
    ConstantsFileError,
    ConstantsParseError,
    GameConstantsError,
    MissingHardcodedTypeError,
    NoGameModeError,
    UnknownGameModeError,
)

_MISSING_KINDS = {
    TypeCategory.DAMAGE: LoadErrorKind.MISSING_DAMAGE_TYPE,
    TypeCategory.ARMOUR: LoadErrorKind.MISSING_ARMOUR_TYPE,
}


@dataclass(frozen=True, slots=True)
class LoadFailure:
    """Why a load stopped, returned instead of raised by the pipeline steps."""

    kind: LoadErrorKind
    message: str
    game_mode: GameMode | None = None
    type_name: str | None = None

    @classmethod
    def no_game_mode(cls) -> LoadFailure:
        return cls(LoadErrorKind.NO_GAME_MODE, str(NoGameModeError()), GameMode.UNDEFINED)

    @classmethod
    def unknown_game_mode(cls, game_mode: object) -> LoadFailure:
        mode = game_mode if isinstance(game_mode, GameMode) else None
        return cls(LoadErrorKind.UNKNOWN_GAME_MODE, str(UnknownGameModeError(game_mode)), mode)

    @classmethod
    def missing_type(
        cls, category: TypeCategory, type_name: str, game_mode: GameMode
    ) -> LoadFailure:
        error = MissingHardcodedTypeError(category, type_name, game_mode)
        return cls(_MISSING_KINDS[category], str(error), game_mode, type_name)

    @classmethod
    def from_exception(cls, exc: ConstantsParseError | ConstantsFileError) -> LoadFailure:
        if isinstance(exc, ConstantsFileError):
            return cls(LoadErrorKind.MALFORMED_DOCUMENT, str(exc))
        return cls(LoadErrorKind.MALFORMED_SECTION, str(exc))

    def to_exception(self) -> GameConstantsError:
        """Build the exception a raising caller should see for this failure."""

        match self.kind:
            case LoadErrorKind.NO_GAME_MODE:
                return NoGameModeError()
            case LoadErrorKind.MISSING_DAMAGE_TYPE | LoadErrorKind.MISSING_ARMOUR_TYPE:
                category = (
                    TypeCategory.DAMAGE
                    if self.kind is LoadErrorKind.MISSING_DAMAGE_TYPE
                    else TypeCategory.ARMOUR
                )
                if self.type_name is None or self.game_mode is None:
                    raise ValueError(f"{self.kind} failure needs a type name and a game mode")
                return MissingHardcodedTypeError(category, self.type_name, self.game_mode)
            case LoadErrorKind.MALFORMED_DOCUMENT:
                return ConstantsFileError(self.message)
            case LoadErrorKind.MALFORMED_SECTION:
                return ConstantsParseError(self.message)
            case _:
                return UnknownGameModeError(self.game_mode, self.message)


@dataclass(slots=True)
class LoadReport:
    """Summary of a load attempt."""

    source: Path | None
    game_mode: GameMode
    damage_types: int = 0
    armour_types: int = 0
    matrix_entries: int = 0
    modifiers_applied: int = 0
    duplicate_damage_types: list[str] = field(default_factory=list)
    duplicate_armour_types: list[str] = field(default_factory=list)
    failure: LoadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
