"""
RSS 2.0 document.

Wraps a channel in the ``<rss version="2.0">`` root, reads documents from
text, bytes, files or parsed trees, and saves them with an XML declaration.
"""

import os
from pathlib import Path
from typing import IO, Any

from lxml import etree
from pydantic import Field

from feedmodel_core.comparison import compare_text, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.logging_config import get_logger
from feedmodel_core.settings import SyndicationResourceLoadSettings, SyndicationResourceSaveSettings
from feedmodel_core.xml import (
    SyndicationXmlWriter,
    get_attribute,
    local_name,
    parse_xml,
    parse_xml_file,
    select_single,
)

from .base import RssEntity
from .channel import ATOM_NAMESPACE, RssChannel
from .extensions import SyndicationExtensionAdapter

logger = get_logger(__name__)

FeedSource = etree._Element | etree._ElementTree | str | bytes | os.PathLike


def _resolve_root(source: FeedSource, encoding: str) -> etree._Element:
    if isinstance(source, etree._ElementTree):
        return source.getroot()
    if isinstance(source, etree._Element):
        return source
    if isinstance(source, bytes):
        return parse_xml(source, encoding)
    if isinstance(source, str) and source.lstrip("\ufeff").lstrip().startswith("<"):
        return parse_xml(source)
    return parse_xml_file(os.fspath(source), encoding)


class RssFeed(RssEntity):
    """An RSS 2.0 syndication feed."""

    version: str = "2.0"
    channel: RssChannel = Field(default_factory=RssChannel)

    def __init__(self, channel: RssChannel | None = None, **data: Any):
        if channel is not None:
            data["channel"] = channel
        super().__init__(**data)

    @classmethod
    def parse(
        cls, content: str | bytes, settings: SyndicationResourceLoadSettings | None = None
    ) -> "RssFeed":
        """
        Build a feed from XML text.

        Raises:
            ValueError: If the content is not well-formed or has no ``<rss>`` root.
        """
        ensure_not_none(content, "content")
        if settings is None:
            settings = SyndicationResourceLoadSettings()

        feed = cls()
        feed.load(parse_xml(content, settings.character_encoding), settings)
        return feed

    @classmethod
    def create(
        cls, source: FeedSource, settings: SyndicationResourceLoadSettings | None = None
    ) -> "RssFeed":
        """Build a feed from a path, XML text, bytes or a parsed tree."""
        feed = cls()
        feed.load(source, settings)
        return feed

    def load(
        self,
        source: FeedSource,
        settings: SyndicationResourceLoadSettings | None = None,
    ) -> bool:
        """
        Populate the feed from an RSS document.

        Args:
            source: Parsed element or tree, XML text or bytes, or a file path.
            settings: Load settings; defaults are used when None. Their
                character encoding applies to bytes and files that do not
                declare one.

        Returns:
            True if the channel loaded any data.

        Raises:
            ValueError: If ``source`` is None, not well-formed, or not an RSS document.
        """
        ensure_not_none(source, "source")
        if settings is None:
            settings = SyndicationResourceLoadSettings()

        root = _resolve_root(source, settings.character_encoding)
        if local_name(root) != "rss":
            raise ValueError(f"Invalid RSS format: expected <rss> root, found <{local_name(root)}>")

        was_loaded = self._load(root, settings)
        SyndicationExtensionAdapter(root, settings).fill(self)
        logger.debug(
            "Feed loaded",
            extra={"items": len(self.channel.items), "extensions": len(self.extensions)},
        )
        return was_loaded

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        version = get_attribute(source, "version")
        if version:
            self.version = version

        node = select_single(source, "channel")
        if node is None:
            return False
        return self.channel.load(node, settings)

    def namespace_declarations(
        self, settings: SyndicationResourceSaveSettings | None = None
    ) -> dict[str | None, str]:
        """Prefixes to declare on ``<rss>``: Atom plus every extension type in use."""
        if settings is None:
            settings = SyndicationResourceSaveSettings()

        types = list(settings.supported_extensions)
        if settings.auto_detect_extensions:
            for entity in (self, self.channel, *self.channel.items):
                SyndicationExtensionAdapter.fill_extension_types(entity, types)

        nsmap: dict[str | None, str] = {"atom": ATOM_NAMESPACE}
        for extension_type in types:
            extension_type().write_xml_namespace_declaration(nsmap)
        return nsmap

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        self._write(writer, SyndicationResourceSaveSettings())

    def _write(self, writer: SyndicationXmlWriter, settings: SyndicationResourceSaveSettings) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("rss", nsmap=self.namespace_declarations(settings))
        writer.write_attribute("version", self.version)
        self.channel.write_to(writer)
        self._write_extensions(writer)
        writer.end_element()

    def save(
        self,
        destination: str | os.PathLike | IO[bytes],
        settings: SyndicationResourceSaveSettings | None = None,
    ) -> None:
        """
        Save the feed as an XML document.

        Args:
            destination: File path or binary stream.
            settings: Encoding and formatting options.
        """
        ensure_not_none(destination, "destination")
        if settings is None:
            settings = SyndicationResourceSaveSettings()

        writer = SyndicationXmlWriter(minimize_output_size=settings.minimize_output_size)
        self._write(writer, settings)
        data = writer.to_bytes(settings.character_encoding, xml_declaration=True)

        if hasattr(destination, "write"):
            destination.write(data)
        else:
            Path(destination).write_bytes(data)

    def _compare_fields(self, other: "RssFeed") -> int:
        return first_difference(
            compare_text(self.version, other.version),
            self.channel.compare_to(other.channel),
        )
