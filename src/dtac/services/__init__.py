"""Service layer for dtac.

Services wrap the domain pipeline for the outer surfaces (CLI and HTTP API):

- ConstantsService: owns a ConstantsStore and reloads it on demand
- load_game_constants / try_load_game_constants: load one file into a store

Production Usage:
    from dtac.factory import create_constants_service
    service = create_constants_service(settings)
    report = service.reload()

Testing Usage:
    from dtac.domain.loader import try_load_document

    class FakeDocument:
        def find_section(self, tag):
            return "Damage_Default"

        def iter_sections(self, tag):
            return iter(())

    report = try_load_document(FakeDocument(), store)
"""

from dtac.services.constants_service import (
    ConstantsService,
    load_game_constants,
    try_load_game_constants,
)

__all__ = [
    "ConstantsService",
    "load_game_constants",
    "try_load_game_constants",
]
