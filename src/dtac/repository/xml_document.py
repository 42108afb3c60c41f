"""lxml-backed access to a GameConstants XML file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from lxml import etree

from dtac.domain.errors import ConstantsFileError

logger = logging.getLogger(__name__)


def _parser() -> etree.XMLParser:
    return etree.XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False)


class XmlConstantsDocument:
    """Read top-level sections from a parsed GameConstants document."""

    def __init__(self, root: etree._Element, source: Path | None = None) -> None:
        self._root = root
        self.source = source

    @classmethod
    def from_path(cls, path: Path | str) -> XmlConstantsDocument:
        """Parse ``path``; a missing file raises ``FileNotFoundError``.

        Raises:
            ConstantsFileError: If the file is not well-formed XML.
        """

        file = Path(path)
        if not path or not file.is_file():
            raise FileNotFoundError(f"not a file: '{path}'")
        try:
            tree = etree.parse(str(file), _parser())
        except etree.XMLSyntaxError as exc:
            raise ConstantsFileError(f"'{file}' is not well-formed XML: {exc}") from exc
        except OSError as exc:
            raise ConstantsFileError(f"could not read '{file}': {exc}") from exc
        logger.debug("parsed constants document %s", file)
        return cls(tree.getroot(), source=file)

    @classmethod
    def from_string(cls, text: str | bytes) -> XmlConstantsDocument:
        if isinstance(text, str):
            text = text.encode("utf-8")
        try:
            root = etree.fromstring(text, _parser())
        except etree.XMLSyntaxError as exc:
            raise ConstantsFileError(f"document is not well-formed XML: {exc}") from exc
        return cls(root)

    def _matching(self, tag: str) -> Iterator[etree._Element]:
        wanted = tag.casefold()
        for element in self._root:
            if isinstance(element.tag, str) and etree.QName(element).localname.casefold() == wanted:
                yield element

    def find_section(self, tag: str) -> str | None:
        for element in self._matching(tag):
            return "".join(element.itertext())
        return None

    def iter_sections(self, tag: str) -> Iterator[str]:
        for element in self._matching(tag):
            yield "".join(element.itertext())
