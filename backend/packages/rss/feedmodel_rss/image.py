"""RSS channel image."""

from typing import Any, ClassVar

from lxml import etree
from pydantic import Field

from feedmodel_core.comparison import compare_text, compare_uri, compare_values, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_int, try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, node_value, select_single

from .base import RssEntity
from .fields import RequiredUri, Text


class RssImage(RssEntity):
    """
    A GIF, JPEG or PNG image displayed with the channel.

    Height and width above their maxima are rejected on assignment but
    clamped when loaded from a feed.
    """

    HEIGHT_DEFAULT: ClassVar[int] = 31
    HEIGHT_MAXIMUM: ClassVar[int] = 400
    WIDTH_DEFAULT: ClassVar[int] = 88
    WIDTH_MAXIMUM: ClassVar[int] = 144

    link: RequiredUri = None
    title: str = Field(default="", min_length=1)
    url: RequiredUri = None
    description: Text = ""
    height: int | None = Field(default=None, le=400)
    width: int | None = Field(default=None, le=144)

    def __init__(
        self,
        link: str | None = None,
        title: str | None = None,
        url: str | None = None,
        **data: Any,
    ):
        if link is not None:
            data["link"] = link
        if title is not None:
            data["title"] = title
        if url is not None:
            data["url"] = url
        super().__init__(**data)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        node = select_single(source, "link")
        if node is not None:
            link = try_parse_uri(node_value(node))
            if link is not None:
                was_loaded = self._apply("link", link) or was_loaded

        node = select_single(source, "title")
        if node is not None and node_value(node):
            was_loaded = self._apply("title", node_value(node)) or was_loaded

        node = select_single(source, "url")
        if node is not None:
            url = try_parse_uri(node_value(node))
            if url is not None:
                was_loaded = self._apply("url", url) or was_loaded

        node = select_single(source, "description")
        if node is not None:
            self.description = node_value(node)
            was_loaded = True

        node = select_single(source, "height")
        if node is not None:
            height = try_parse_int(node_value(node))
            if height is not None:
                was_loaded = self._apply("height", min(height, self.HEIGHT_MAXIMUM)) or was_loaded

        node = select_single(source, "width")
        if node is not None:
            width = try_parse_int(node_value(node))
            if width is not None:
                was_loaded = self._apply("width", min(width, self.WIDTH_MAXIMUM)) or was_loaded

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("image")
        writer.write_element_string("link", self.link or "")
        writer.write_element_string("title", self.title)
        writer.write_element_string("url", self.url or "")
        if self.description:
            writer.write_element_string("description", self.description)
        if self.height is not None:
            writer.write_element_string("height", str(self.height))
        if self.width is not None:
            writer.write_element_string("width", str(self.width))
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssImage") -> int:
        return first_difference(
            compare_text(self.description, other.description),
            compare_values(self.height, other.height),
            compare_uri(self.link, other.link),
            compare_text(self.title, other.title),
            compare_uri(self.url, other.url),
            compare_values(self.width, other.width),
        )
