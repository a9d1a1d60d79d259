"""Unit tests for the RssFeed document."""

import io

import pytest

from feedmodel_core.settings import SyndicationResourceLoadSettings, SyndicationResourceSaveSettings
from feedmodel_core.xml import parse_xml
from feedmodel_rss import RssChannel, RssFeed, RssItem
from feedmodel_rss.extensions import (
    DublinCoreElementSetSyndicationExtension,
    WellFormedWebCommentsSyndicationExtension,
)


class TestRssFeedLoad:
    """Test reading feeds."""

    def test_parse_text(self, sample_feed_xml):
        feed = RssFeed.parse(sample_feed_xml)

        assert feed.version == "2.0"
        assert feed.channel.title == "Liftoff News"
        assert len(feed.channel.items) == 3

    def test_parse_bytes_with_settings(self, sample_feed_xml):
        settings = SyndicationResourceLoadSettings(retrieval_limit=1)
        feed = RssFeed.parse(sample_feed_xml.encode("utf-8"), settings)

        assert len(feed.channel.items) == 1

    def test_create_from_path(self, tmp_path, sample_feed_xml):
        path = tmp_path / "feed.xml"
        path.write_text(sample_feed_xml, encoding="utf-8")

        feed = RssFeed.create(path)
        assert feed.channel.link == "http://liftoff.msfc.nasa.gov/"

    def test_create_from_element(self, sample_feed_xml):
        feed = RssFeed.create(parse_xml(sample_feed_xml))
        assert feed.channel.title == "Liftoff News"

    def test_item_extensions_are_loaded(self, sample_feed_xml):
        item = RssFeed.parse(sample_feed_xml).channel.items[0]

        dublin_core = item.find_extension_of_type(DublinCoreElementSetSyndicationExtension)
        comments = item.find_extension_of_type(WellFormedWebCommentsSyndicationExtension)
        assert dublin_core.creator == "Jane Doe"
        assert comments.comment_rss == "http://liftoff.msfc.nasa.gov/comments/573.xml"

    def test_undeclared_bytes_use_configured_encoding(self):
        content = '<rss version="2.0"><channel><title>café</title></channel></rss>'
        settings = SyndicationResourceLoadSettings(character_encoding="iso-8859-1")

        feed = RssFeed.parse(content.encode("latin-1"), settings)
        assert feed.channel.title == "café"

    def test_file_uses_configured_encoding(self, tmp_path):
        content = '<rss version="2.0"><channel><title>café</title></channel></rss>'
        path = tmp_path / "latin1.xml"
        path.write_bytes(content.encode("latin-1"))
        settings = SyndicationResourceLoadSettings(character_encoding="iso-8859-1")

        feed = RssFeed.create(path, settings)
        assert feed.channel.title == "café"

    def test_create_from_text_with_byte_order_mark(self, sample_feed_xml):
        feed = RssFeed.create("\ufeff" + sample_feed_xml)
        assert feed.channel.title == "Liftoff News"

    def test_malformed_raises(self):
        with pytest.raises(ValueError, match="Invalid XML format"):
            RssFeed.parse("<rss><channel></rss>")

    def test_wrong_root_raises(self):
        with pytest.raises(ValueError, match="expected <rss> root"):
            RssFeed.parse('<feed xmlns="http://www.w3.org/2005/Atom"/>')

    def test_missing_channel(self):
        feed = RssFeed()
        assert feed.load(parse_xml('<rss version="0.92"/>')) is False
        assert feed.version == "0.92"

    def test_none_source_raises(self):
        with pytest.raises(ValueError):
            RssFeed().load(None)


class TestRssFeedSave:
    """Test writing feeds."""

    def test_save_round_trip(self, tmp_path, sample_feed_xml):
        feed = RssFeed.parse(sample_feed_xml)
        path = tmp_path / "out.xml"
        feed.save(path)

        reloaded = RssFeed.create(path)
        assert reloaded == feed
        assert reloaded.channel.items[0].has_extensions

    def test_save_to_stream_has_declaration(self):
        feed = RssFeed(RssChannel("http://example.com/", "Title", "Description"))
        stream = io.BytesIO()
        feed.save(stream)

        data = stream.getvalue()
        assert data.startswith(b"<?xml")
        assert b'<rss xmlns:atom="http://www.w3.org/2005/Atom" version="2.0">' in data

    def test_minimized_save(self):
        feed = RssFeed(RssChannel("http://example.com/", "Title", "Description"))
        stream = io.BytesIO()
        feed.save(stream, SyndicationResourceSaveSettings(minimize_output_size=True))

        body = stream.getvalue().split(b"?>", 1)[1].strip()
        assert b"\n" not in body

    def test_extension_namespaces_declared_on_root(self, sample_feed_xml):
        output = RssFeed.parse(sample_feed_xml).to_string()
        root_tag = output[: output.index(">")]

        assert 'xmlns:dc="http://purl.org/dc/elements/1.1/"' in root_tag
        assert 'xmlns:wfw="http://wellformedweb.org/CommentAPI/"' in root_tag
        assert "xmlns:creativeCommons=" in root_tag
        assert output.count("xmlns:dc=") == 1

    def test_supported_extensions_declared(self):
        feed = RssFeed(RssChannel("http://example.com/", "Title", "Description"))
        settings = SyndicationResourceSaveSettings(
            supported_extensions=[DublinCoreElementSetSyndicationExtension]
        )
        assert feed.namespace_declarations(settings)["dc"] == (
            "http://purl.org/dc/elements/1.1/"
        )


class TestRssFeedComparison:
    """Test feed ordering."""

    def test_version_then_channel(self):
        first = RssFeed(RssChannel("http://example.com/", "A", "D"))
        second = RssFeed(RssChannel("http://example.com/", "B", "D"))

        assert first < second
        second.channel.title = "A"
        assert first == second

    def test_channel_items_compare(self):
        first = RssFeed(RssChannel("http://example.com/", "A", "D"))
        second = RssFeed(RssChannel("http://example.com/", "A", "D"))
        second.channel.add_item(RssItem("x"))

        assert first < second
