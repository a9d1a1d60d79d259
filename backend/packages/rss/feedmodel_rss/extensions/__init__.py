"""
Syndication extensions.

Framework extensions are detected automatically from the namespaces
declared in a document; custom ones are registered through
``SyndicationResourceLoadSettings.supported_extensions``.
"""

from .adapter import SyndicationExtensionAdapter
from .base import SyndicationExtension
from .creative_commons import CreativeCommonsSyndicationExtension
from .dublin_core import DublinCoreElementSetSyndicationExtension, DublinCoreTypeVocabulary
from .wfw import WellFormedWebCommentsSyndicationExtension

__all__ = [
    "SyndicationExtension",
    "SyndicationExtensionAdapter",
    "CreativeCommonsSyndicationExtension",
    "DublinCoreElementSetSyndicationExtension",
    "DublinCoreTypeVocabulary",
    "WellFormedWebCommentsSyndicationExtension",
]
