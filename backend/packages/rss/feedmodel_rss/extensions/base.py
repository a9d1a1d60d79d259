"""
Syndication extension base class.

An extension maps elements from a foreign XML namespace (Dublin Core,
Well-Formed Web, ...) onto a typed model that can be attached to any
entity and written back out after the entity's own children.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from lxml import etree
from pydantic import BaseModel, ConfigDict

from feedmodel_core.guard import ensure_not_none
from feedmodel_core.xml import SyndicationXmlWriter, namespaces_in_scope


class SyndicationExtension(BaseModel, ABC):
    """
    Base class for syndication extensions.

    Subclasses declare the namespace they handle through class attributes
    and implement ``load`` and ``write_to``.
    """

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    XML_PREFIX: ClassVar[str] = ""
    XML_NAMESPACE: ClassVar[str] = ""
    NAME: ClassVar[str] = ""
    DESCRIPTION: ClassVar[str] = ""
    DOCUMENTATION: ClassVar[str] = ""
    VERSION: ClassVar[str] = "1.0"

    def namespaces(self, source: etree._Element) -> dict[str, str]:
        """
        Prefix map for querying this extension's elements under ``source``.

        The document's own binding for the prefix wins over the default
        namespace, so feeds that bind the prefix to a variant URI still load.
        """
        ensure_not_none(source, "source")
        in_scope = namespaces_in_scope(source)
        return {self.XML_PREFIX: in_scope.get(self.XML_PREFIX) or self.XML_NAMESPACE}

    def exists_in_source(self, source: etree._Element) -> bool:
        """True if the extension's namespace or prefix is declared in scope."""
        ensure_not_none(source, "source")
        in_scope = namespaces_in_scope(source)
        return self.XML_NAMESPACE in in_scope.values() or self.XML_PREFIX in in_scope

    def write_xml_namespace_declaration(self, nsmap: dict[str | None, str]) -> None:
        """Register this extension's prefix in a namespace map for a root element."""
        ensure_not_none(nsmap, "nsmap")
        nsmap.setdefault(self.XML_PREFIX, self.XML_NAMESPACE)

    def qualified(self, name: str) -> str:
        return f"{self.XML_PREFIX}:{name}"

    def write_element(self, writer: SyndicationXmlWriter, name: str, value: str) -> None:
        """Write one element in this extension's namespace."""
        writer.write_element_string(name, value, self.XML_NAMESPACE, self.XML_PREFIX)

    @abstractmethod
    def load(self, source: etree._Element) -> bool:
        """Populate from ``source``; True if any extension data was found."""

    @abstractmethod
    def write_to(self, writer: SyndicationXmlWriter) -> None:
        """Write the extension's elements at the writer's current position."""
