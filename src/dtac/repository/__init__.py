"""Document access for GameConstants files."""

from dtac.repository.xml_document import XmlConstantsDocument

__all__ = ["XmlConstantsDocument"]
