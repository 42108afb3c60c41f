"""File-level entry points and the service shared by the CLI and the API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from dtac.config import Settings
from dtac.domain.enums import GameMode
from dtac.domain.errors import ConstantsFileError
from dtac.domain.hardcoded import DEFAULT_HARDCODED_TYPES, HardcodedTypeRegistry
from dtac.domain.loader import try_load_document
from dtac.domain.models import Armour, Damage
from dtac.domain.results import LoadFailure, LoadReport
from dtac.domain.store import ConstantsSnapshot, ConstantsStore
from dtac.interfaces.document import IConstantsDocument
from dtac.repository.xml_document import XmlConstantsDocument

logger = logging.getLogger(__name__)

DocumentReader = Callable[[Path], IConstantsDocument]


def try_load_game_constants(
    path: Path | str,
    store: ConstantsStore,
    *,
    hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    reader: DocumentReader = XmlConstantsDocument.from_path,
) -> LoadReport:
    """Load ``path`` into ``store`` and return the report without raising.

    A missing file raises ``FileNotFoundError`` before the store is touched.
    """

    if not path or not Path(path).is_file():
        raise FileNotFoundError(f"not a file: '{path}'")

    source = Path(path)
    logger.info("loading game constants from %s (mode: %s)", source, store.game_mode)
    report = LoadReport(source=source, game_mode=store.game_mode)
    try:
        document = reader(source)
    except ConstantsFileError as exc:
        logger.critical("could not read constants file: %s", exc)
        report.failure = LoadFailure.from_exception(exc)
        return report
    return try_load_document(document, store, hardcoded=hardcoded, report=report)


def load_game_constants(
    path: Path | str,
    store: ConstantsStore,
    *,
    hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    reader: DocumentReader = XmlConstantsDocument.from_path,
) -> LoadReport:
    """Load ``path`` into ``store``.

    Raises:
        FileNotFoundError: If ``path`` is not an existing file.
        GameConstantsError: If the file is malformed or misses a type required
            by the store's game mode.  ``store.loaded`` stays false.
    """

    report = try_load_game_constants(path, store, hardcoded=hardcoded, reader=reader)
    if report.failure is not None:
        raise report.failure.to_exception()
    return report


class ConstantsService:
    """Own a store and reload it on demand for the outer surfaces."""

    def __init__(
        self,
        store: ConstantsStore,
        settings: Settings,
        *,
        hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    ) -> None:
        self.store = store
        self.settings = settings
        self._hardcoded = hardcoded
        self.last_report: LoadReport | None = None

    def reload(
        self, path: Path | str | None = None, game_mode: GameMode | None = None
    ) -> LoadReport:
        """Reload constants, defaulting to the configured file.

        ``game_mode`` is kept only if the load succeeds; otherwise the store
        returns to its previous mode.

        Raises:
            FileNotFoundError: If no file is configured or it does not exist.
        """

        target = path or self.settings.game_constants_path
        if target is None:
            raise FileNotFoundError("no game constants file configured")
        with self.store.lock:
            previous_mode = self.store.game_mode
            if game_mode is not None:
                self.store.game_mode = game_mode
            try:
                report = try_load_game_constants(target, self.store, hardcoded=self._hardcoded)
            except Exception:
                self.store.game_mode = previous_mode
                raise
            if not report.ok:
                self.store.game_mode = previous_mode
        self.last_report = report
        return report

    def snapshot(self) -> ConstantsSnapshot:
        return self.store.snapshot()

    def factor(self, damage_name: str, armour_name: str) -> float:
        """Return the factor for a pair of type names; ``KeyError`` if either is unknown."""

        return self.snapshot().factor(Damage(damage_name), Armour(armour_name))
