"""
RSS channel.

The channel carries feed metadata, its categories, skip schedule and the
ordered list of items. Loading honours the retrieval limit from the load
settings and recognises the Atom ``link rel="self"`` profile element.
"""

from typing import Annotated, Any, ClassVar

from lxml import etree
from pydantic import AfterValidator, Field

from feedmodel_core import __version__
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
from feedmodel_core.logging_config import get_logger
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import (
    DayOfWeek,
    try_parse_day_of_week,
    try_parse_int,
    try_parse_language,
    try_parse_uri,
)
from feedmodel_core.xml import (
    SyndicationXmlWriter,
    get_attribute,
    node_value,
    select_all,
    select_single,
)

from .base import RssEntity
from .category import RssCategory
from .cloud import RssCloud
from .extensions import SyndicationExtensionAdapter
from .fields import OptionalUri, RequiredUri, Text, Timestamp
from .image import RssImage
from .item import RssItem
from .text_input import RssTextInput

logger = get_logger(__name__)

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


def _validate_language(value: str | None) -> str | None:
    if value is None:
        return None
    language = try_parse_language(value)
    if language is None:
        raise ValueError(f"'{value}' is not a valid language tag")
    return language


def _validate_skip_days(value: list[DayOfWeek]) -> list[DayOfWeek]:
    if len(set(value)) != len(value):
        raise ValueError("skip_days must not contain duplicates")
    return value


def _validate_skip_hours(value: list[int]) -> list[int]:
    for hour in value:
        if not 0 <= hour <= 23:
            raise ValueError(f"skip hour {hour} is outside 0..23")
    if len(set(value)) != len(value):
        raise ValueError("skip_hours must not contain duplicates")
    return value


def _default_generator() -> str:
    return f"feedmodel {__version__}"


class RssChannel(RssEntity):
    """
    Metadata and content of an RSS feed.

    ``title``, ``link`` and ``description`` are required by RSS 2.0 and
    always written; every other element is omitted while unset.
    """

    DOCUMENTATION: ClassVar[str] = "http://www.rssboard.org/rss-specification"

    title: str = Field(default="", min_length=1)
    link: RequiredUri = None
    description: str = Field(default="", min_length=1)

    copyright: Text = ""
    generator: Text = Field(default_factory=_default_generator)
    language: Annotated[str | None, AfterValidator(_validate_language)] = None
    last_build_date: Timestamp = None
    managing_editor: Text = ""  # Email address
    publication_date: Timestamp = None
    rating: Text = ""  # PICS rating
    time_to_live: int | None = Field(default=None, ge=0)  # Minutes
    webmaster: Text = ""  # Email address

    cloud: RssCloud | None = None
    image: RssImage | None = None
    text_input: RssTextInput | None = None
    self_link: OptionalUri = None  # atom:link rel="self"

    categories: list[RssCategory] = Field(default_factory=list)
    skip_days: Annotated[list[DayOfWeek], AfterValidator(_validate_skip_days)] = Field(
        default_factory=list
    )
    skip_hours: Annotated[list[int], AfterValidator(_validate_skip_hours)] = Field(
        default_factory=list
    )
    items: list[RssItem] = Field(default_factory=list)

    def __init__(
        self,
        link: str | None = None,
        title: str | None = None,
        description: str | None = None,
        **data: Any,
    ):
        if link is not None:
            data["link"] = link
        if title is not None:
            data["title"] = title
        if description is not None:
            data["description"] = description
        super().__init__(**data)

    def __getitem__(self, index: int) -> RssItem:
        return self.items[index]

    def add_item(self, item: RssItem) -> bool:
        """Append an item; returns True once added."""
        ensure_not_none(item, "item")
        self.items.append(item)
        return True

    def remove_item(self, item: RssItem) -> bool:
        """Remove an item; returns False if the channel did not contain it."""
        ensure_not_none(item, "item")
        if item in self.items:
            self.items.remove(item)
            return True
        return False

    @staticmethod
    def compare_sequence(source: list[RssItem], target: list[RssItem]) -> int:
        """Compare item lists position by position; the longer list ranks higher."""
        return compare_sequence(source, target)

    def load(
        self,
        source: etree._Element,
        settings: SyndicationResourceLoadSettings | None = None,
    ) -> bool:
        """
        Populate the channel from a ``<channel>`` element.

        Extensions are always loaded; default settings are used when none
        are given.

        Args:
            source: The ``<channel>`` element.
            settings: Retrieval limit and extension options.

        Returns:
            True if at least one channel element was applied.

        Raises:
            ValueError: If ``source`` is None.
        """
        ensure_not_none(source, "source")
        if settings is None:
            settings = SyndicationResourceLoadSettings()

        was_loaded = self._load(source, settings)
        SyndicationExtensionAdapter(source, settings).fill(self)
        return was_loaded

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        ensure_not_none(settings, "settings")
        was_loaded = False

        node = select_single(source, "description")
        if node is not None and node_value(node):
            was_loaded = self._apply("description", node_value(node)) or was_loaded

        node = select_single(source, "link")
        if node is not None:
            link = try_parse_uri(node_value(node))
            if link is not None:
                was_loaded = self._apply("link", link) or was_loaded

        node = select_single(source, "title")
        if node is not None and node_value(node):
            was_loaded = self._apply("title", node_value(node)) or was_loaded

        if self.load_optionals(source, settings):
            was_loaded = True
        if self.load_collections(source, settings):
            was_loaded = True
        if self.load_profile(source):
            was_loaded = True

        return was_loaded

    def load_optionals(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings
    ) -> bool:
        """Load the optional channel elements."""
        ensure_not_none(source, "source")
        ensure_not_none(settings, "settings")
        was_loaded = False

        node = select_single(source, "cloud")
        if node is not None:
            cloud = RssCloud()
            if cloud.load(node, settings):
                self.cloud = cloud
                was_loaded = True

        for field, element in (
            ("copyright", "copyright"),
            ("generator", "generator"),
            ("managing_editor", "managingEditor"),
            ("rating", "rating"),
            ("webmaster", "webMaster"),
        ):
            node = select_single(source, element)
            if node is not None:
                setattr(self, field, node_value(node))
                was_loaded = True

        node = select_single(source, "image")
        if node is not None:
            image = RssImage()
            if image.load(node, settings):
                self.image = image
                was_loaded = True

        node = select_single(source, "language")
        if node is not None and node_value(node):
            language = try_parse_language(node_value(node))
            if language is not None:
                self.language = language
                was_loaded = True
            else:
                logger.warning(
                    "Unable to determine language", extra={"language": node_value(node)}
                )

        for field, element in (
            ("last_build_date", "lastBuildDate"),
            ("publication_date", "pubDate"),
        ):
            node = select_single(source, element)
            if node is not None:
                date = try_parse_rfc822(node_value(node))
                if date is not None:
                    setattr(self, field, date)
                    was_loaded = True

        node = select_single(source, "textInput")
        if node is not None:
            text_input = RssTextInput()
            if text_input.load(node, settings):
                self.text_input = text_input
                was_loaded = True

        node = select_single(source, "ttl")
        if node is not None:
            time_to_live = try_parse_int(node_value(node))
            if time_to_live is not None:
                was_loaded = self._apply("time_to_live", time_to_live) or was_loaded

        return was_loaded

    def load_collections(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings
    ) -> bool:
        """
        Load categories, skip days, skip hours and items.

        At most ``settings.retrieval_limit`` items are kept when the limit
        is non-zero.
        """
        ensure_not_none(source, "source")
        ensure_not_none(settings, "settings")
        was_loaded = False

        for node in select_all(source, "category"):
            category = RssCategory()
            if category.load(node, settings):
                self.categories.append(category)
                was_loaded = True

        for node in select_all(source, "skipDays/day"):
            text = node_value(node)
            if not text:
                continue
            day = try_parse_day_of_week(text)
            if day is None:
                logger.warning("Unable to determine day of week", extra={"day": text})
            elif day not in self.skip_days:
                self.skip_days.append(day)
                was_loaded = True

        for node in select_all(source, "skipHours/hour"):
            hour = try_parse_int(node_value(node))
            if hour is None:
                continue
            if 0 <= hour <= 23 and hour not in self.skip_hours:
                self.skip_hours.append(hour)
                was_loaded = True
            else:
                logger.warning("Discarding duplicate or out-of-range skip hour", extra={"hour": hour})

        counter = 0
        for node in select_all(source, "item"):
            item = RssItem()
            counter += 1
            if item.load(node, settings):
                if settings.retrieval_limit != 0 and counter > settings.retrieval_limit:
                    logger.debug(
                        "Retrieval limit reached", extra={"limit": settings.retrieval_limit}
                    )
                    break
                self.items.append(item)
                was_loaded = True

        return was_loaded

    def load_profile(self, source: etree._Element) -> bool:
        """Load the Atom self link, stopping at the first ``rel="self"`` link."""
        ensure_not_none(source, "source")
        for node in select_all(source, "atom:link", {"atom": ATOM_NAMESPACE}):
            if get_attribute(node, "rel").lower() != "self":
                continue
            href = try_parse_uri(get_attribute(node, "href"))
            if href is not None:
                self.self_link = href
                return True
            break
        return False

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("channel")

        writer.write_element_string("title", self.title)
        writer.write_element_string("link", self.link or "")
        writer.write_element_string("description", self.description)

        if self.cloud is not None:
            self.cloud.write_to(writer)
        if self.copyright:
            writer.write_element_string("copyright", self.copyright)
        writer.write_element_string("docs", self.DOCUMENTATION)
        if self.generator:
            writer.write_element_string("generator", self.generator)
        if self.image is not None:
            self.image.write_to(writer)
        if self.language:
            writer.write_element_string("language", self.language)
        if self.last_build_date is not None:
            writer.write_element_string("lastBuildDate", to_rfc822(self.last_build_date))
        if self.managing_editor:
            writer.write_element_string("managingEditor", self.managing_editor)
        if self.publication_date is not None:
            writer.write_element_string("pubDate", to_rfc822(self.publication_date))
        if self.rating:
            writer.write_element_string("rating", self.rating)
        if self.text_input is not None:
            self.text_input.write_to(writer)
        if self.time_to_live is not None:
            writer.write_element_string("ttl", str(self.time_to_live))
        if self.webmaster:
            writer.write_element_string("webMaster", self.webmaster)

        if self.skip_days:
            writer.start_element("skipDays")
            for day in self.skip_days:
                writer.write_element_string("day", day.display_name)
            writer.end_element()

        if self.skip_hours:
            writer.start_element("skipHours")
            for hour in self.skip_hours:
                writer.write_element_string("hour", str(hour))
            writer.end_element()

        for category in self.categories:
            category.write_to(writer)

        if self.self_link:
            writer.start_element("link", ATOM_NAMESPACE, prefix="atom")
            writer.write_attribute("href", self.self_link)
            writer.write_attribute("rel", "self")
            writer.write_attribute("type", "application/rss+xml")
            writer.end_element()

        self._write_extensions(writer)

        for item in self.items:
            item.write_to(writer)

        writer.end_element()

    def _compare_fields(self, other: "RssChannel") -> int:
        return first_difference(
            compare_text(self.copyright, other.copyright),
            compare_text(self.description, other.description),
            compare_text(self.generator, other.generator),
            compare_values(self.last_build_date, other.last_build_date),
            compare_uri(self.link, other.link),
            compare_text(self.managing_editor, other.managing_editor),
            compare_values(self.publication_date, other.publication_date),
            compare_text(self.rating, other.rating),
            compare_values(self.time_to_live, other.time_to_live),
            compare_text(self.title, other.title),
            compare_text(self.webmaster, other.webmaster),
            compare_optional(self.cloud, other.cloud),
            compare_optional(self.image, other.image),
            compare_text(self.language, other.language),
            compare_optional(self.text_input, other.text_input),
            compare_sequence(self.categories, other.categories),
            self.compare_sequence(self.items, other.items),
            compare_sequence(self.skip_days, other.skip_days),
            compare_sequence(self.skip_hours, other.skip_hours),
        )
