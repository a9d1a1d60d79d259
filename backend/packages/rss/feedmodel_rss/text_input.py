"""RSS text input box."""

from typing import Any

from lxml import etree
from pydantic import Field

from feedmodel_core.comparison import compare_text, compare_uri, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, node_value, select_single

from .base import RssEntity
from .fields import RequiredUri


class RssTextInput(RssEntity):
    """A text input box submitted to ``link`` as the ``name`` query parameter."""

    description: str = Field(default="", min_length=1)
    link: RequiredUri = None
    name: str = Field(default="", min_length=1)
    title: str = Field(default="", min_length=1)

    def __init__(
        self,
        description: str | None = None,
        link: str | None = None,
        name: str | None = None,
        title: str | None = None,
        **data: Any,
    ):
        for field, value in (
            ("description", description),
            ("link", link),
            ("name", name),
            ("title", title),
        ):
            if value is not None:
                data[field] = value
        super().__init__(**data)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        for field in ("description", "name", "title"):
            node = select_single(source, field)
            if node is not None and node_value(node):
                was_loaded = self._apply(field, node_value(node)) or was_loaded

        node = select_single(source, "link")
        if node is not None:
            link = try_parse_uri(node_value(node))
            if link is not None:
                was_loaded = self._apply("link", link) or was_loaded

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("textInput")
        writer.write_element_string("description", self.description)
        writer.write_element_string("link", self.link or "")
        writer.write_element_string("name", self.name)
        writer.write_element_string("title", self.title)
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssTextInput") -> int:
        return first_difference(
            compare_text(self.description, other.description),
            compare_uri(self.link, other.link),
            compare_text(self.name, other.name),
            compare_text(self.title, other.title),
        )
