"""RSS category."""

from typing import Any

from lxml import etree

from feedmodel_core.comparison import compare_text, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.xml import SyndicationXmlWriter, get_attribute, node_value

from .base import RssEntity
from .fields import Text


class RssCategory(RssEntity):
    """
    A category a channel or item belongs to.

    ``value`` is a forward-slash separated hierarchy such as
    'MSDN/Syndication/RSS'; ``domain`` identifies the taxonomy.
    """

    value: Text = ""
    domain: Text = ""

    def __init__(
        self,
        value: str | list[str] | None = None,
        domain: str | None = None,
        **data: Any,
    ):
        if isinstance(value, list):
            value = "/".join(value)
        if value is not None:
            data["value"] = value
        if domain is not None:
            data["domain"] = domain
        super().__init__(**data)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        text = node_value(source)
        if text:
            was_loaded = self._apply("value", text) or was_loaded

        domain = get_attribute(source, "domain")
        if domain:
            was_loaded = self._apply("domain", domain) or was_loaded

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("category")
        if self.domain:
            writer.write_attribute("domain", self.domain)
        writer.write_string(self.value)
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssCategory") -> int:
        return first_difference(
            compare_text(self.domain, other.domain),
            compare_text(self.value, other.value),
        )
