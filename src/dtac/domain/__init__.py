"""Domain model for loading game balance constants.

This package hosts everything the load pipeline needs and nothing that
touches files or the network:

* Value types and registries for damage, armour and the matrix (see :mod:`models`).
* Enumerations for game modes, section tags and failure kinds.
* Section text parsers (see :mod:`parsing`).
* Hardcoded type sets per game mode (see :mod:`hardcoded`).
* The caller-owned store and the pipeline itself (see :mod:`store`, :mod:`loader`).
"""

from . import enums, errors, hardcoded, loader, models, parsing, results, store

__all__ = [
    "enums",
    "errors",
    "hardcoded",
    "loader",
    "models",
    "parsing",
    "results",
    "store",
]
