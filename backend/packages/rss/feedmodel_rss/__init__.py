"""
Feedmodel RSS Package.

Object model for RSS 2.0 documents: loading from lxml trees, writing back
to XML, ordering and equality, and pluggable namespace extensions.
"""

__version__ = "0.1.0"

from .category import RssCategory
from .channel import RssChannel
from .cloud import RssCloud, RssCloudProtocol
from .enclosure import RssEnclosure
from .feed import RssFeed
from .guid import RssGuid
from .image import RssImage
from .item import RssItem
from .source import RssSource
from .text_input import RssTextInput

__all__ = [
    "RssCategory",
    "RssChannel",
    "RssCloud",
    "RssCloudProtocol",
    "RssEnclosure",
    "RssFeed",
    "RssGuid",
    "RssImage",
    "RssItem",
    "RssSource",
    "RssTextInput",
]
