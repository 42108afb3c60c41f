"""Runtime state backing the dtac HTTP API."""

from __future__ import annotations

import logging

from dtac.config import Settings, get_settings
from dtac.domain.hardcoded import DEFAULT_HARDCODED_TYPES, HardcodedTypeRegistry
from dtac.factory import create_constants_service
from dtac.services.constants_service import ConstantsService

logger = logging.getLogger(__name__)


class ApiState:
    """Services shared by the FastAPI layer."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES,
    ) -> None:
        self.settings = settings or get_settings()
        self.constants: ConstantsService = create_constants_service(self.settings, hardcoded)

    def startup(self) -> None:
        """Load the configured constants file, if any.

        Failures are logged and leave the store unloaded so the API can still
        serve ``/health`` and accept a corrected ``/reload``.
        """

        path = self.settings.game_constants_path
        if path is None:
            logger.info("no game constants file configured; waiting for /reload")
            return
        try:
            report = self.constants.reload(path)
        except FileNotFoundError as exc:
            logger.error("configured game constants file is missing: %s", exc)
            return
        if not report.ok:
            logger.error("startup load of %s failed; constants not loaded", path)


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
