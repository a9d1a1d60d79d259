"""
Extension adapter.

Discovers which extensions apply to a source node, loads them and attaches
them to an entity; writes an entity's extensions back out.
"""

from collections.abc import Iterable
from typing import Any

from lxml import etree

from feedmodel_core.guard import ensure_not_none
from feedmodel_core.logging_config import get_logger
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.xml import SyndicationXmlWriter, namespaces_in_scope

from .base import SyndicationExtension

logger = get_logger(__name__)


class SyndicationExtensionAdapter:
    """Fills entities with extension data found in a source node."""

    def __init__(self, node: etree._Element, settings: SyndicationResourceLoadSettings):
        """
        Initialize the adapter.

        Args:
            node: Element whose children may carry extension data.
            settings: Load settings controlling auto-detection and user extensions.
        """
        ensure_not_none(node, "node")
        ensure_not_none(settings, "settings")
        self.node = node
        self.settings = settings

    @staticmethod
    def framework_extensions() -> list[type[SyndicationExtension]]:
        """Extension types shipped with the library."""
        from .creative_commons import CreativeCommonsSyndicationExtension
        from .dublin_core import DublinCoreElementSetSyndicationExtension
        from .wfw import WellFormedWebCommentsSyndicationExtension

        return [
            CreativeCommonsSyndicationExtension,
            DublinCoreElementSetSyndicationExtension,
            WellFormedWebCommentsSyndicationExtension,
        ]

    @staticmethod
    def get_extensions(
        types: Iterable[type[SyndicationExtension]],
        namespaces: dict[str, str] | None = None,
    ) -> list[SyndicationExtension]:
        """
        Instantiate extension types.

        Args:
            types: User-supplied extension types.
            namespaces: When given, framework extensions whose namespace or
                prefix appears here are included ahead of ``types``.

        Returns:
            One instance per distinct type.
        """
        ensure_not_none(types, "types")
        candidates: list[type[SyndicationExtension]] = []

        if namespaces is not None:
            for extension_type in SyndicationExtensionAdapter.framework_extensions():
                if (
                    extension_type.XML_NAMESPACE in namespaces.values()
                    or extension_type.XML_PREFIX in namespaces
                ):
                    candidates.append(extension_type)

        for extension_type in types:
            if extension_type is not None and extension_type not in candidates:
                candidates.append(extension_type)

        return [extension_type() for extension_type in candidates]

    @staticmethod
    def fill_extension_types(entity: Any, types: list[type[SyndicationExtension]]) -> None:
        """Append the types of the entity's extensions to ``types``, skipping duplicates."""
        ensure_not_none(entity, "entity")
        ensure_not_none(types, "types")
        for extension in entity.extensions:
            if type(extension) not in types:
                types.append(type(extension))

    @staticmethod
    def write_extensions_to(
        extensions: Iterable[SyndicationExtension], writer: SyndicationXmlWriter
    ) -> None:
        """Write each extension at the writer's current position."""
        ensure_not_none(extensions, "extensions")
        ensure_not_none(writer, "writer")
        for extension in extensions:
            extension.write_to(writer)

    def fill(self, entity: Any) -> None:
        """
        Load applicable extensions from the node into ``entity.extensions``.

        Args:
            entity: Any object exposing an ``extensions`` list.
        """
        ensure_not_none(entity, "entity")

        if self.settings.auto_detect_extensions:
            extensions = self.get_extensions(
                self.settings.supported_extensions, namespaces_in_scope(self.node)
            )
        else:
            extensions = self.get_extensions(self.settings.supported_extensions)

        for extension in extensions:
            if not extension.exists_in_source(self.node) or type(extension) is type(entity):
                continue
            instance = type(extension)()
            if instance.load(self.node):
                entity.extensions.append(instance)
                logger.debug(
                    "Extension loaded",
                    extra={"extension": type(instance).__name__, "entity": type(entity).__name__},
                )
