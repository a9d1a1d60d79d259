"""RSS item."""

from typing import Any

from lxml import etree
from pydantic import Field

from feedmodel_core.comparison import (
    compare_optional,
    compare_sequence,
    compare_text,
    compare_uri,
    compare_values,
    first_difference,
)
from feedmodel_core.datetime_utility import to_rfc822, try_parse_rfc822
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, node_value, select_all, select_single

from .base import RssEntity
from .category import RssCategory
from .enclosure import RssEnclosure
from .fields import OptionalUri, Text, Timestamp
from .guid import RssGuid
from .source import RssSource


class RssItem(RssEntity):
    """
    A story, post or other entry in a channel.

    RSS requires at least one of ``title`` or ``description``; this is left
    to the caller and not checked on assignment.
    """

    title: Text = ""
    description: Text = ""
    link: OptionalUri = None
    author: Text = ""  # Email address of the author
    comments: OptionalUri = None
    guid: RssGuid | None = None
    publication_date: Timestamp = None
    source: RssSource | None = None
    categories: list[RssCategory] = Field(default_factory=list)
    enclosures: list[RssEnclosure] = Field(default_factory=list)

    def __init__(
        self,
        title: str | None = None,
        description: str | None = None,
        link: str | None = None,
        **data: Any,
    ):
        if title is not None:
            data["title"] = title
        if description is not None:
            data["description"] = description
        if link is not None:
            data["link"] = link
        super().__init__(**data)

    @staticmethod
    def compare_sequence(source: list[RssEnclosure], target: list[RssEnclosure]) -> int:
        """Compare enclosure lists; the longer list ranks higher."""
        return compare_sequence(source, target)

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        for field in ("title", "description", "author"):
            node = select_single(source, field)
            if node is not None:
                setattr(self, field, node_value(node))
                was_loaded = True

        for field in ("link", "comments"):
            node = select_single(source, field)
            if node is not None:
                uri = try_parse_uri(node_value(node))
                if uri is not None:
                    was_loaded = self._apply(field, uri) or was_loaded

        node = select_single(source, "guid")
        if node is not None:
            guid = RssGuid()
            if guid.load(node, settings):
                self.guid = guid
                was_loaded = True

        node = select_single(source, "pubDate")
        if node is not None:
            publication_date = try_parse_rfc822(node_value(node))
            if publication_date is not None:
                self.publication_date = publication_date
                was_loaded = True

        node = select_single(source, "source")
        if node is not None:
            republished_from = RssSource()
            if republished_from.load(node, settings):
                self.source = republished_from
                was_loaded = True

        for node in select_all(source, "category"):
            category = RssCategory()
            if category.load(node, settings):
                self.categories.append(category)

        for node in select_all(source, "enclosure"):
            enclosure = RssEnclosure()
            if enclosure.load(node, settings):
                self.enclosures.append(enclosure)

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("item")

        if self.title:
            writer.write_element_string("title", self.title)
        if self.description:
            writer.write_element_string("description", self.description)
        if self.link:
            writer.write_element_string("link", self.link)
        if self.author:
            writer.write_element_string("author", self.author)
        if self.comments:
            writer.write_element_string("comments", self.comments)
        if self.guid is not None:
            self.guid.write_to(writer)
        if self.publication_date is not None:
            writer.write_element_string("pubDate", to_rfc822(self.publication_date))
        if self.source is not None:
            self.source.write_to(writer)

        for category in self.categories:
            category.write_to(writer)
        for enclosure in self.enclosures:
            enclosure.write_to(writer)

        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssItem") -> int:
        return first_difference(
            compare_text(self.author, other.author),
            compare_uri(self.comments, other.comments),
            compare_text(self.description, other.description),
            compare_uri(self.link, other.link),
            compare_values(self.publication_date, other.publication_date),
            compare_text(self.title, other.title),
            compare_optional(self.guid, other.guid),
            compare_optional(self.source, other.source),
            compare_sequence(self.categories, other.categories),
            self.compare_sequence(self.enclosures, other.enclosures),
        )
