"""
Common behaviour for RSS entities.

Every entity is a pydantic model with validated assignment, loads itself
from an lxml element, writes itself through a ``SyndicationXmlWriter``
and orders itself against entities of the same type.
"""

from abc import abstractmethod
from collections.abc import Callable
from typing import Any

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from feedmodel_core.guard import ensure_not_none
from feedmodel_core.logging_config import get_logger
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.xml import SyndicationXmlWriter

from .extensions import SyndicationExtension, SyndicationExtensionAdapter

logger = get_logger(__name__)


class RssEntity(BaseModel):
    """Base class for RSS 2.0 entities."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    extensions: list[SyndicationExtension] = Field(default_factory=list)

    # Extension bag

    @property
    def has_extensions(self) -> bool:
        return len(self.extensions) > 0

    def add_extension(self, extension: SyndicationExtension) -> bool:
        """Append an extension; returns True once added."""
        ensure_not_none(extension, "extension")
        self.extensions.append(extension)
        return True

    def remove_extension(self, extension: SyndicationExtension) -> bool:
        """Remove an extension; returns False if it was not attached."""
        ensure_not_none(extension, "extension")
        if extension in self.extensions:
            self.extensions.remove(extension)
            return True
        return False

    def find_extension(
        self, match: Callable[[SyndicationExtension], bool]
    ) -> SyndicationExtension | None:
        """First attached extension satisfying ``match``."""
        ensure_not_none(match, "match")
        return next((extension for extension in self.extensions if match(extension)), None)

    def find_extension_of_type(self, extension_type: type) -> SyndicationExtension | None:
        ensure_not_none(extension_type, "extension_type")
        return self.find_extension(lambda extension: isinstance(extension, extension_type))

    # Loading

    def load(
        self,
        source: etree._Element,
        settings: SyndicationResourceLoadSettings | None = None,
    ) -> bool:
        """
        Populate this entity from an XML element.

        Args:
            source: Element representing this entity.
            settings: When given, extensions found under ``source`` are loaded too.

        Returns:
            True if at least one recognized field was applied.

        Raises:
            ValueError: If ``source`` is None.
        """
        ensure_not_none(source, "source")
        was_loaded = self._load(source, settings)
        if settings is not None:
            SyndicationExtensionAdapter(source, settings).fill(self)
        return was_loaded

    @abstractmethod
    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        """Read the entity's own fields from ``source``."""

    def _apply(self, field: str, value: Any) -> bool:
        """
        Assign a loaded value, skipping it if validation rejects it.

        Returns:
            True if the value was assigned.
        """
        try:
            setattr(self, field, value)
        except ValidationError:
            logger.debug(
                "Skipping invalid field value",
                extra={"entity": type(self).__name__, "field": field, "value": value},
            )
            return False
        return True

    # Writing

    @abstractmethod
    def write_to(self, writer: SyndicationXmlWriter) -> None:
        """Write this entity as an element."""

    def _write_extensions(self, writer: SyndicationXmlWriter) -> None:
        SyndicationExtensionAdapter.write_extensions_to(self.extensions, writer)

    def to_string(self) -> str:
        """XML fragment for this entity."""
        writer = SyndicationXmlWriter()
        self.write_to(writer)
        return writer.to_string()

    def __str__(self) -> str:
        return self.to_string()

    # Ordering

    def compare_to(self, obj: Any) -> int:
        """
        Order this entity against another of the same type.

        Returns:
            -1, 0 or 1; 1 if ``obj`` is None.

        Raises:
            TypeError: If ``obj`` is not the same entity type.
        """
        if obj is None:
            return 1
        if not isinstance(obj, type(self)):
            raise TypeError(
                f"obj is not of type {type(self).__name__}, "
                f"type was found to be '{type(obj).__name__}'."
            )
        return self._compare_fields(obj)

    @abstractmethod
    def _compare_fields(self, other: Any) -> int:
        """Field-by-field comparison against an entity of the same type."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self.to_string().casefold())
