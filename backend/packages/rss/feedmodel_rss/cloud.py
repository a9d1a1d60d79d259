"""RSS cloud (rssCloud publish-subscribe registration)."""

from enum import IntEnum
from typing import Annotated, Any

from lxml import etree
from pydantic import AfterValidator, Field

from feedmodel_core.comparison import compare_text, compare_values, first_difference
from feedmodel_core.guard import ensure_not_none
from feedmodel_core.settings import SyndicationResourceLoadSettings
from feedmodel_core.values import try_parse_int
from feedmodel_core.xml import SyndicationXmlWriter, get_attribute

from .base import RssEntity


class RssCloudProtocol(IntEnum):
    """Protocols a cloud web service can be reached with."""

    NONE = 0
    SOAP = 1
    XML_RPC = 2


_PROTOCOL_NAMES = {
    RssCloudProtocol.SOAP: "soap",
    RssCloudProtocol.XML_RPC: "xml-rpc",
}


def _reject_none_protocol(value: RssCloudProtocol) -> RssCloudProtocol:
    if value == RssCloudProtocol.NONE:
        raise ValueError("protocol must not be RssCloudProtocol.NONE")
    return value


class RssCloud(RssEntity):
    """
    A web service that supports the rssCloud interface.

    Subscribers register with ``register_procedure`` at ``domain:port/path``
    to be notified of channel updates.
    """

    domain: str = Field(default="", min_length=1)
    path: str = Field(default="", min_length=1)
    port: int = Field(default=80, ge=0)
    protocol: Annotated[RssCloudProtocol, AfterValidator(_reject_none_protocol)] = (
        RssCloudProtocol.XML_RPC
    )
    register_procedure: str = Field(default="", min_length=1)

    def __init__(
        self,
        domain: str | None = None,
        path: str | None = None,
        port: int | None = None,
        protocol: RssCloudProtocol | None = None,
        register_procedure: str | None = None,
        **data: Any,
    ):
        for field, value in (
            ("domain", domain),
            ("path", path),
            ("port", port),
            ("protocol", protocol),
            ("register_procedure", register_procedure),
        ):
            if value is not None:
                data[field] = value
        super().__init__(**data)

    @staticmethod
    def cloud_protocol_as_string(protocol: RssCloudProtocol) -> str:
        """Attribute value for a protocol, e.g. 'xml-rpc'; '' for NONE."""
        return _PROTOCOL_NAMES.get(protocol, "")

    @staticmethod
    def cloud_protocol_by_name(name: str) -> RssCloudProtocol:
        """
        Look up a protocol by its attribute value or enum name.

        Returns:
            Matching protocol, or ``RssCloudProtocol.NONE`` if unknown.
        """
        ensure_not_none(name, "name")
        text = name.strip().lower()
        for protocol in RssCloudProtocol:
            if protocol == RssCloudProtocol.NONE:
                continue
            if text in (_PROTOCOL_NAMES[protocol], protocol.name.lower()):
                return protocol
        return RssCloudProtocol.NONE

    def _load(
        self, source: etree._Element, settings: SyndicationResourceLoadSettings | None
    ) -> bool:
        was_loaded = False

        for field, attribute in (
            ("domain", "domain"),
            ("path", "path"),
            ("register_procedure", "registerProcedure"),
        ):
            value = get_attribute(source, attribute)
            if value:
                was_loaded = self._apply(field, value) or was_loaded

        port = try_parse_int(get_attribute(source, "port"))
        if port is not None and port > 0:
            was_loaded = self._apply("port", port) or was_loaded

        protocol = get_attribute(source, "protocol")
        if protocol:
            service_protocol = self.cloud_protocol_by_name(protocol)
            if service_protocol != RssCloudProtocol.NONE:
                self.protocol = service_protocol
                was_loaded = True

        return was_loaded

    def write_to(self, writer: SyndicationXmlWriter) -> None:
        ensure_not_none(writer, "writer")
        writer.start_element("cloud")
        writer.write_attribute("domain", self.domain)
        writer.write_attribute("path", self.path)
        writer.write_attribute("port", str(self.port))
        writer.write_attribute("protocol", self.cloud_protocol_as_string(self.protocol))
        writer.write_attribute("registerProcedure", self.register_procedure)
        self._write_extensions(writer)
        writer.end_element()

    def _compare_fields(self, other: "RssCloud") -> int:
        return first_difference(
            compare_text(self.domain, other.domain),
            compare_text(self.path, other.path),
            compare_values(self.port, other.port),
            compare_values(self.protocol, other.protocol),
            compare_text(self.register_procedure, other.register_procedure),
        )
