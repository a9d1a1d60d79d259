"""RSS item guid."""

from typing import Any

from lxml import etree

from feedmodel_core.comparison import compare_text, compare_values, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_bool
from feedmodel_core.xml import SyndicationXmlWriter, get_attribute, node_value

from .base import RssEntity
from .fields import Text


class RssGuid(RssEntity):
    """
    A string that uniquely identifies an item.

    When ``is_permalink`` is true, readers may assume the value is a URL
    pointing to the full item.
    """

    value: Text = ""
    is_permalink: bool = True

    def __init__(self, value: str | None = None, is_permalink: bool | None = None, **data: Any):
        if value is not None:
            data["value"] = value
        if is_permalink is not None:
            data["is_permalink"] = is_permalink
        super().__init__(**data)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        is_permalink = try_parse_bool(get_attribute(source, "isPermaLink"))
        if is_permalink is not None:
            self.is_permalink = is_permalink
            was_loaded = True

        text = node_value(source)
        if text:
            self.value = text
            was_loaded = True

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("guid")
        writer.write_attribute("isPermaLink", "true" if self.is_permalink else "false")
        writer.write_string(self.value)
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssGuid") -> int:
        return first_difference(
            compare_values(self.is_permalink, other.is_permalink),
            compare_text(self.value, other.value),
        )
