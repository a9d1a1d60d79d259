"""RSS item source."""

from typing import Any

from lxml import etree

from feedmodel_core.comparison import compare_text, compare_uri, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, get_attribute, node_value

from .base import RssEntity
from .fields import RequiredUri, Text


class RssSource(RssEntity):
    """The channel an item was republished from."""

    url: RequiredUri = None  # The source channel's feed
    title: Text = ""

    def __init__(self, url: str | None = None, title: str | None = None, **data: Any):
        if url is not None:
            data["url"] = url
        if title is not None:
            data["title"] = title
        super().__init__(**data)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        url = try_parse_uri(get_attribute(source, "url"))
        if url is not None:
            self.url = url
            was_loaded = True

        text = node_value(source)
        if text:
            self.title = text
            was_loaded = True

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("source")
        writer.write_attribute("url", self.url or "")
        writer.write_string(self.title)
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssSource") -> int:
        return first_difference(
            compare_text(self.title, other.title),
            compare_uri(self.url, other.url),
        )
