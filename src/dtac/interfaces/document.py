"""Constants Document Protocol Interface.

This module defines the protocol (interface) the loader uses to read tagged
sections from a GameConstants document, so the pipeline can run against any
parsed document (or an in-memory fake in tests).
"""

from collections.abc import Iterator
from typing import Protocol


class IConstantsDocument(Protocol):
    """Protocol defining read access to the top-level sections of a document.

    Section tags are matched case-insensitively against the immediate
    children of the document root.
    """

    def find_section(self, tag: str) -> str | None:
        """Return the text of the first section named ``tag``.

        Args:
            tag: Section tag, e.g. ``"Damage_Types"``

        Returns:
            Text content of the first matching element, or ``None`` when the
            document has no such section
        """
        ...

    def iter_sections(self, tag: str) -> Iterator[str]:
        """Yield the text of every section named ``tag`` in document order.

        Args:
            tag: Section tag, e.g. ``"Damage_To_Armor_Mod"``
        """
        ...
