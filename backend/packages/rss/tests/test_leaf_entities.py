"""Unit tests for category, enclosure, image, cloud, text input, guid and source."""

import pytest
from pydantic import ValidationError

from feedmodel_core.xml import parse_xml
from feedmodel_rss import (
    RssCategory,
    RssCloud,
    RssCloudProtocol,
    RssEnclosure,
    RssGuid,
    RssImage,
    RssItem,
    RssSource,
    RssTextInput,
)


class TestRssCategory:
    """Test RssCategory."""

    def test_hierarchy_constructor(self):
        category = RssCategory(["MSDN", "Syndication", "RSS"], "http://example.com/taxonomy")
        assert category.value == "MSDN/Syndication/RSS"
        assert category.domain == "http://example.com/taxonomy"

    def test_values_are_trimmed_and_none_is_empty(self):
        category = RssCategory("  News  ")
        category.domain = None
        assert category.value == "News"
        assert category.domain == ""

    def test_load(self):
        category = RssCategory()
        assert category.load(parse_xml('<category domain="Syndic8">1765</category>')) is True
        assert category.value == "1765"
        assert category.domain == "Syndic8"

    def test_load_empty_element(self):
        assert RssCategory().load(parse_xml("<category/>")) is False

    def test_write(self):
        category = RssCategory("1765", "Syndic8")
        assert category.to_string() == '<category domain="Syndic8">1765</category>'

    def test_write_without_domain(self):
        assert str(RssCategory("News")) == "<category>News</category>"

    def test_equality_ignores_case(self):
        first = RssCategory("News", "Syndic8")
        second = RssCategory("NEWS", "syndic8")
        assert first == second
        assert hash(first) == hash(second)

    def test_ordering_by_domain_then_value(self):
        assert RssCategory("b", "a") < RssCategory("a", "b")
        assert RssCategory("a", "x") < RssCategory("b", "x")


class TestRssEnclosure:
    """Test RssEnclosure."""

    def test_load(self):
        enclosure = RssEnclosure()
        source = parse_xml(
            '<enclosure url="http://example.com/a.mp3" length="12216320" type="audio/mpeg"/>'
        )
        assert enclosure.load(source) is True
        assert enclosure.length == 12216320
        assert enclosure.content_type == "audio/mpeg"
        assert enclosure.url == "http://example.com/a.mp3"

    def test_negative_length_loads_as_zero(self):
        enclosure = RssEnclosure()
        enclosure.load(parse_xml('<enclosure length="-5"/>'))
        assert enclosure.length == 0

    def test_negative_length_setter_raises(self):
        with pytest.raises(ValidationError):
            RssEnclosure().length = -1

    def test_empty_content_type_raises(self):
        enclosure = RssEnclosure(10, "audio/mpeg", "http://example.com/a.mp3")
        with pytest.raises(ValidationError):
            enclosure.content_type = "  "

    def test_invalid_url_is_skipped_on_load(self):
        enclosure = RssEnclosure()
        assert enclosure.load(parse_xml('<enclosure url="http://exa mple.com/"/>')) is False
        assert enclosure.url is None

    def test_write(self):
        enclosure = RssEnclosure(10, "audio/mpeg", "http://example.com/a.mp3")
        assert enclosure.to_string() == (
            '<enclosure length="10" type="audio/mpeg" url="http://example.com/a.mp3"/>'
        )


class TestRssImage:
    """Test RssImage."""

    def test_dimensions_are_clamped_on_load(self):
        image = RssImage()
        assert image.load(parse_xml("<image><height>999</height><width>500</width></image>"))
        assert image.height == RssImage.HEIGHT_MAXIMUM == 400
        assert image.width == RssImage.WIDTH_MAXIMUM == 144

    def test_dimensions_above_maximum_raise_on_set(self):
        image = RssImage()
        with pytest.raises(ValidationError):
            image.height = 999
        with pytest.raises(ValidationError):
            image.width = 145

    def test_required_fields(self):
        image = RssImage("http://example.com/", "Logo", "http://example.com/logo.gif")
        with pytest.raises(ValidationError):
            image.title = ""
        with pytest.raises(ValidationError):
            image.url = None

    def test_write_order(self):
        image = RssImage("http://example.com/", "Logo", "http://example.com/logo.gif")
        image.height = 31
        output = image.to_string()

        assert output.index("<link>") < output.index("<title>") < output.index("<url>")
        assert "<height>31</height>" in output
        assert "<width>" not in output
        assert "<description>" not in output

    def test_defaults(self):
        assert RssImage.HEIGHT_DEFAULT == 31
        assert RssImage.WIDTH_DEFAULT == 88


class TestRssCloud:
    """Test RssCloud."""

    def test_defaults(self):
        cloud = RssCloud()
        assert cloud.port == 80
        assert cloud.protocol == RssCloudProtocol.XML_RPC

    def test_none_protocol_rejected(self):
        with pytest.raises(ValidationError):
            RssCloud().protocol = RssCloudProtocol.NONE

    def test_negative_port_rejected(self):
        with pytest.raises(ValidationError):
            RssCloud().port = -1

    def test_protocol_names(self):
        assert RssCloud.cloud_protocol_as_string(RssCloudProtocol.XML_RPC) == "xml-rpc"
        assert RssCloud.cloud_protocol_as_string(RssCloudProtocol.SOAP) == "soap"
        assert RssCloud.cloud_protocol_by_name("XML-RPC") == RssCloudProtocol.XML_RPC
        assert RssCloud.cloud_protocol_by_name("http-post") == RssCloudProtocol.NONE

    def test_load_ignores_non_positive_port(self):
        cloud = RssCloud()
        cloud.load(parse_xml('<cloud domain="rpc.sys.com" port="0" protocol="soap"/>'))
        assert cloud.port == 80
        assert cloud.protocol == RssCloudProtocol.SOAP

    def test_xml_rpc_round_trip(self):
        cloud = RssCloud("rpc.sys.com", "/RPC2", 8080, RssCloudProtocol.XML_RPC, "pingMe")
        loaded = RssCloud()

        assert loaded.load(parse_xml(cloud.to_string())) is True
        assert loaded.protocol == RssCloudProtocol.XML_RPC
        assert loaded.port == 8080
        assert loaded == cloud

    def test_write(self):
        cloud = RssCloud("rpc.sys.com", "/RPC2", 80, RssCloudProtocol.SOAP, "pingMe")
        assert cloud.to_string() == (
            '<cloud domain="rpc.sys.com" path="/RPC2" port="80" '
            'protocol="soap" registerProcedure="pingMe"/>'
        )


class TestRssTextInput:
    """Test RssTextInput."""

    def test_load_and_write(self):
        text_input = RssTextInput()
        source = parse_xml(
            "<textInput><title>Search</title><description>Search the archive</description>"
            "<name>q</name><link>http://example.com/search</link></textInput>"
        )
        assert text_input.load(source) is True
        assert text_input.name == "q"

        output = text_input.to_string()
        assert output.index("<description>") < output.index("<link>") < output.index("<name>")

    def test_required_name(self):
        with pytest.raises(ValidationError):
            RssTextInput().name = None


class TestRssGuidAndSource:
    """Test RssGuid and RssSource."""

    def test_guid_permalink_flag(self):
        guid = RssGuid()
        assert guid.load(parse_xml('<guid isPermaLink="FALSE">item572</guid>')) is True
        assert guid.is_permalink is False
        assert guid.value == "item572"
        assert guid.to_string() == '<guid isPermaLink="false">item572</guid>'

    def test_guid_defaults_to_permalink(self):
        assert RssGuid("http://example.com/1").is_permalink is True

    def test_source(self):
        source = RssSource()
        assert source.load(parse_xml('<source url="http://example.com/rss">Example</source>'))
        assert source.url == "http://example.com/rss"
        assert source.to_string() == '<source url="http://example.com/rss">Example</source>'


class TestEntityContract:
    """Behaviour shared by every entity."""

    ENTITIES = [
        RssCategory,
        RssCloud,
        RssEnclosure,
        RssGuid,
        RssImage,
        RssItem,
        RssSource,
        RssTextInput,
    ]

    @pytest.mark.parametrize("entity_type", ENTITIES)
    def test_load_none_raises(self, entity_type):
        with pytest.raises(ValueError):
            entity_type().load(None)

    @pytest.mark.parametrize("entity_type", ENTITIES)
    def test_write_none_raises(self, entity_type):
        with pytest.raises(ValueError):
            entity_type().write_to(None)

    @pytest.mark.parametrize("entity_type", ENTITIES)
    def test_compare_to_none(self, entity_type):
        assert entity_type().compare_to(None) == 1

    def test_compare_to_other_type_raises(self):
        with pytest.raises(TypeError):
            RssCategory().compare_to(RssGuid())

    def test_equality_with_other_type_is_false(self):
        assert (RssCategory() == RssGuid()) is False
        assert (RssCategory() == "category") is False

    def test_non_string_text_raises_validation_error(self):
        item = RssItem()
        with pytest.raises(ValidationError):
            item.title = 5

    def test_non_string_text_is_skipped_on_apply(self):
        item = RssItem("Title")
        assert item._apply("title", 5) is False
        assert item.title == "Title"
