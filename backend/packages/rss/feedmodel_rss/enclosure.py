"""RSS enclosure."""

from typing import Any

from lxml import etree
from pydantic import Field

from feedmodel_core.comparison import compare_text, compare_uri, compare_values, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_int, try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, get_attribute

from .base import RssEntity
from .fields import RequiredUri


class RssEnclosure(RssEntity):
    """A media object attached to an item."""

    content_type: str = Field(default="", min_length=1)  # MIME type
    length: int | None = Field(default=None, ge=0)  # Bytes; None until set
    url: RequiredUri = None

    def __init__(
        self,
        length: int | None = None,
        content_type: str | None = None,
        url: str | None = None,
        **data: Any,
    ):
        if length is not None:
            data["length"] = length
        if content_type is not None:
            data["content_type"] = content_type
        if url is not None:
            data["url"] = url
        super().__init__(**data)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        length = try_parse_int(get_attribute(source, "length"))
        if length is not None:
            self.length = max(length, 0)
            was_loaded = True

        content_type = get_attribute(source, "type")
        if content_type:
            was_loaded = self._apply("content_type", content_type) or was_loaded

        url = try_parse_uri(get_attribute(source, "url"))
        if url is not None:
            was_loaded = self._apply("url", url) or was_loaded

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("enclosure")
        writer.write_attribute("length", str(self.length) if self.length is not None else "")
        writer.write_attribute("type", self.content_type)
        writer.write_attribute("url", self.url or "")
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssEnclosure") -> int:
        return first_difference(
            compare_text(self.content_type, other.content_type),
            compare_values(self.length, other.length),
            compare_uri(self.url, other.url),
        )
