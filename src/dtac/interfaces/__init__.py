"""Protocol-based interfaces for dtac collaborators.

This module exports the protocol interfaces the loading pipeline depends on,
enabling dependency injection and testing without a real XML parser.
"""

from dtac.interfaces.document import IConstantsDocument

__all__ = [
    "IConstantsDocument",
]
