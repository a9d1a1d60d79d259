"""
Dublin Core Metadata Element Set extension.

Covers the fifteen ``dc:`` elements. ``dc:date`` is read and written as
RFC-3339; ``dc:type`` is restricted to the DCMI type vocabulary.
"""

from enum import Enum

from lxml import etree

from feedmodel_core.datetime_utility import to_rfc3339, try_parse_rfc3339
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.logging_config import get_logger
from feedmodel_core.values import try_parse_language
from feedmodel_core.xml import SyndicationXmlWriter, node_value, select_single

from ..fields import Text, Timestamp
from .base import SyndicationExtension

logger = get_logger(__name__)

# Free-text elements, in the order they are written
_TEXT_ELEMENTS = (
    "contributor",
    "coverage",
    "creator",
    "description",
    "format",
    "identifier",
    "publisher",
    "relation",
    "rights",
    "source",
    "subject",
    "title",
)


class DublinCoreTypeVocabulary(str, Enum):
    """DCMI Type Vocabulary terms."""

    COLLECTION = "Collection"
    DATASET = "Dataset"
    EVENT = "Event"
    IMAGE = "Image"
    INTERACTIVE_RESOURCE = "InteractiveResource"
    MOVING_IMAGE = "MovingImage"
    PHYSICAL_OBJECT = "PhysicalObject"
    SERVICE = "Service"
    SOFTWARE = "Software"
    SOUND = "Sound"
    STILL_IMAGE = "StillImage"
    TEXT = "Text"

    @classmethod
    def from_name(cls, name: str) -> "DublinCoreTypeVocabulary | None":
        """Look a term up case-insensitively; None if unknown."""
        text = name.strip().lower()
        for term in cls:
            if term.value.lower() == text:
                return term
        return None


class DublinCoreElementSetSyndicationExtension(SyndicationExtension):
    """Dublin Core element set attached to a channel or item."""

    XML_PREFIX = "dc"
    XML_NAMESPACE = "http://purl.org/dc/elements/1.1/"
    NAME = "Dublin Core Metadata Element Set"
    DESCRIPTION = "Fifteen generic elements for describing resources."
    DOCUMENTATION = "http://dublincore.org/documents/dces/"
    VERSION = "1.1"

    contributor: Text = ""
    coverage: Text = ""
    creator: Text = ""
    date: Timestamp = None
    description: Text = ""
    format: Text = ""
    identifier: Text = ""
    language: str | None = None
    publisher: Text = ""
    relation: Text = ""
    rights: Text = ""
    source: Text = ""
    subject: Text = ""
    title: Text = ""
    type_vocabulary: DublinCoreTypeVocabulary | None = None

    def load(self, source: etree._Element) -> bool:
        ensure_not_none(source, "source")
        namespaces = self.namespaces(source)
        was_loaded = False

        for name in _TEXT_ELEMENTS:
            node = select_single(source, self.qualified(name), namespaces)
            if node is not None and node_value(node).strip():
                setattr(self, name, node_value(node))
                was_loaded = True

        node = select_single(source, self.qualified("date"), namespaces)
        if node is not None:
            date = try_parse_rfc3339(node_value(node))
            if date is not None:
                self.date = date
                was_loaded = True

        node = select_single(source, self.qualified("language"), namespaces)
        if node is not None and node_value(node).strip():
            language = try_parse_language(node_value(node))
            if language is not None:
                self.language = language
                was_loaded = True
            else:
                logger.warning(
                    "Unable to determine language", extra={"language": node_value(node)}
                )

        node = select_single(source, self.qualified("type"), namespaces)
        if node is not None:
            term = DublinCoreTypeVocabulary.from_name(node_value(node))
            if term is not None:
                self.type_vocabulary = term
                was_loaded = True

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        for name in _TEXT_ELEMENTS[:3]:
            if getattr(self, name):
                self.write_element(writer, name, getattr(self, name))
        if self.date is not None:
            self.write_element(writer, "date", to_rfc3339(self.date))
        for name in _TEXT_ELEMENTS[3:6]:
            if getattr(self, name):
                self.write_element(writer, name, getattr(self, name))
        if self.language:
            self.write_element(writer, "language", self.language)
        for name in _TEXT_ELEMENTS[6:]:
            if getattr(self, name):
                self.write_element(writer, name, getattr(self, name))
        if self.type_vocabulary is not None:
            self.write_element(writer, "type", self.type_vocabulary.value)
