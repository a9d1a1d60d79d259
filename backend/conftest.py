"""Global pytest fixtures for testing."""

import pytest
from lxml import etree

from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.xml import SyndicationXmlWriter, parse_xml

SAMPLE_FEED = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0"
     xmlns:atom="http://www.w3.org/2005/Atom"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:wfw="http://wellformedweb.org/CommentAPI/"
     xmlns:creativeCommons="http://backend.userland.com/creativeCommonsRssModule">
  <channel>
    <title>Liftoff News</title>
    <link>http://liftoff.msfc.nasa.gov/</link>
    <description>Liftoff to Space Exploration.</description>
    <language>en-us</language>
    <pubDate>Tue, 10 Jun 2003 04:00:00 GMT</pubDate>
    <lastBuildDate>Tue, 10 Jun 2003 09:41:01 GMT</lastBuildDate>
    <generator>Weblog Editor 2.0</generator>
    <managingEditor>editor@example.com</managingEditor>
    <webMaster>webmaster@example.com</webMaster>
    <ttl>60</ttl>
    <cloud domain="rpc.sys.com" port="80" path="/RPC2" registerProcedure="pingMe" protocol="soap"/>
    <image>
      <url>http://liftoff.msfc.nasa.gov/news.gif</url>
      <title>Liftoff News</title>
      <link>http://liftoff.msfc.nasa.gov/</link>
      <width>88</width>
      <height>31</height>
    </image>
    <textInput>
      <title>Search</title>
      <description>Search the archive</description>
      <name>q</name>
      <link>http://liftoff.msfc.nasa.gov/search</link>
    </textInput>
    <category domain="Syndic8">1765</category>
    <category>Space/Exploration</category>
    <skipDays>
      <day>Saturday</day>
      <day>sunday</day>
    </skipDays>
    <skipHours>
      <hour>0</hour>
      <hour>1</hour>
    </skipHours>
    <atom:link href="http://liftoff.msfc.nasa.gov/rss.xml" rel="self" type="application/rss+xml"/>
    <creativeCommons:license>http://creativecommons.org/licenses/by/4.0/</creativeCommons:license>
    <item>
      <title>Star City</title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp</link>
      <description>How do Americans get ready to work with Russians aboard the ISS?</description>
      <pubDate>Tue, 03 Jun 2003 09:39:21 GMT</pubDate>
      <guid>http://liftoff.msfc.nasa.gov/2003/06/03.html#item573</guid>
      <dc:creator>Jane Doe</dc:creator>
      <wfw:commentRss>http://liftoff.msfc.nasa.gov/comments/573.xml</wfw:commentRss>
    </item>
    <item>
      <description>Sky watchers in Europe, Asia, and parts of Alaska and Canada.</description>
      <pubDate>Fri, 30 May 2003 11:06:42 GMT</pubDate>
      <guid isPermaLink="false">item572</guid>
      <enclosure url="http://liftoff.msfc.nasa.gov/eclipse.mp3" length="12216320" type="audio/mpeg"/>
      <source url="http://www.example.com/feed.xml">Example Source</source>
    </item>
    <item>
      <title>The Engine That Does More</title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-VASIMR.asp</link>
      <category>Propulsion</category>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def sample_feed_xml() -> str:
    """Return a representative RSS 2.0 document."""
    return SAMPLE_FEED


@pytest.fixture
def channel_element() -> etree._Element:
    """Return the parsed <channel> element of the sample feed."""
    return parse_xml(SAMPLE_FEED).find("channel")


@pytest.fixture
def load_settings() -> SyndicationResourceLoadSettings:
    """Return default load settings."""
    return SyndicationResourceLoadSettings()


@pytest.fixture
def writer() -> SyndicationXmlWriter:
    """Return a fresh XML writer."""
    return SyndicationXmlWriter()
