"""Service Factory for dtac.

Use these functions in production code to wire services from settings. For
testing, build a ConstantsStore directly and inject fake documents instead.

Example:
    from dtac.factory import create_constants_service
    service = create_constants_service(get_settings())
"""

from dtac.config import Settings
from dtac.domain.hardcoded import DEFAULT_HARDCODED_TYPES, HardcodedTypeRegistry
from dtac.domain.store import ConstantsStore
from dtac.services.constants_service import ConstantsService


def create_constants_store(settings: Settings) -> ConstantsStore:
    """Create an empty store for the configured game mode."""
    return ConstantsStore(game_mode=settings.game_mode)


def create_constants_service(
    settings: Settings, hardcoded: HardcodedTypeRegistry = DEFAULT_HARDCODED_TYPES
) -> ConstantsService:
    """Create a ConstantsService with a fresh store.

    Args:
        settings: Application settings
        hardcoded: Required types per game mode

    Returns:
        Service whose store has not been loaded yet
    """
    return ConstantsService(create_constants_store(settings), settings, hardcoded=hardcoded)
