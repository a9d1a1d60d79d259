"""Creative Commons license extension."""

from lxml import etree
from pydantic import Field

from feedmodel_core.guard import ensure_not_none
from feedmodel_core.values import try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, node_value, select_all

from .base import SyndicationExtension


class CreativeCommonsSyndicationExtension(SyndicationExtension):
    """Licenses a channel or item is published under, as license URIs."""

    XML_PREFIX = "creativeCommons"
    XML_NAMESPACE = "http://backend.userland.com/creativeCommonsRssModule"
    NAME = "Creative Commons"
    DESCRIPTION = "Identifies the Creative Commons licenses that apply to content."
    DOCUMENTATION = "http://backend.userland.com/creativeCommonsRssModule"

    licenses: list[str] = Field(default_factory=list)

    def load(self, source: etree._Element) -> bool:
        ensure_not_none(source, "source")
        was_loaded = False
        for node in select_all(source, self.qualified("license"), self.namespaces(source)):
            uri = try_parse_uri(node_value(node))
            if uri is not None:
                self.licenses.append(uri)
                was_loaded = True
        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        for license_uri in self.licenses:
            self.write_element(writer, "license", license_uri)
