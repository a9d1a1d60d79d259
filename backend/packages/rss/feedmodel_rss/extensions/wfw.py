"""Well-Formed Web comment API extension."""

from lxml import etree

from feedmodel_core.guard import ensure_not_none
from feedmodel_core.values import try_parse_uri
from feedmodel_core.xml import SyndicationXmlWriter, node_value, select_single

from ..fields import OptionalUri
from .base import SyndicationExtension


class WellFormedWebCommentsSyndicationExtension(SyndicationExtension):
    """
    Comment endpoints for an item.

    ``comment`` is the URI comments are posted to, ``comment_rss`` the feed
    of comments on the item.
    """

    XML_PREFIX = "wfw"
    XML_NAMESPACE = "http://wellformedweb.org/CommentAPI/"
    NAME = "Well-Formed Web Comment API"
    DESCRIPTION = "Exposes comment endpoints for syndicated items."
    DOCUMENTATION = "http://wellformedweb.org/news/wfw_namespace_elements/"

    comment: OptionalUri = None
    comment_rss: OptionalUri = None

    def load(self, source: etree._Element) -> bool:
        ensure_not_none(source, "source")
        namespaces = self.namespaces(source)
        was_loaded = False

        comment = select_single(source, self.qualified("comment"), namespaces)
        if comment is not None:
            uri = try_parse_uri(node_value(comment))
            if uri is not None:
                self.comment = uri
                was_loaded = True

        comment_rss = select_single(source, self.qualified("commentRss"), namespaces)
        if comment_rss is None:
            # Early drafts spelled it commentRSS
            comment_rss = select_single(source, self.qualified("commentRSS"), namespaces)
        if comment_rss is not None:
            uri = try_parse_uri(node_value(comment_rss))
            if uri is not None:
                self.comment_rss = uri
                was_loaded = True

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        if self.comment:
            self.write_element(writer, "comment", self.comment)
        if self.comment_rss:
            self.write_element(writer, "commentRss", self.comment_rss)
