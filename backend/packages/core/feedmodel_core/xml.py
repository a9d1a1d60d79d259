"""
XML navigation and writing.

Thin helpers over lxml used by every entity: reading children, attributes
and string values from a parsed node, and a writer that builds output
element by element.
"""

import codecs
import re
from pathlib import Path

from lxml import etree

from .guard import ensure_not_empty, ensure_not_none

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")
_DECLARED_ENCODING = re.compile(rb"^\s*<\?xml[^>]*\bencoding\s*=")
_BOMS = (codecs.BOM_UTF8, codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)


def _parser(encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
    )


def _declares_encoding(data: bytes) -> bool:
    return data.startswith(_BOMS) or _DECLARED_ENCODING.match(data) is not None


def parse_xml(content: str | bytes, encoding: str | None = None) -> etree._Element:
    """
    Parse XML content into an element tree.

    Args:
        content: XML document as text or encoded bytes.
        encoding: Character encoding for bytes that carry neither a byte
            order mark nor an encoding declaration.

    Returns:
        Root element.

    Raises:
        ValueError: If the content is not well-formed XML.
    """
    ensure_not_none(content, "content")
    if isinstance(content, str):
        # lxml refuses text that still declares an encoding
        content = _XML_DECLARATION.sub("", content.lstrip("\ufeff"), count=1).encode("utf-8")
        encoding = None
    elif _declares_encoding(content):
        encoding = None
    try:
        return etree.fromstring(content, _parser(encoding))
    except etree.XMLSyntaxError as e:
        raise ValueError(f"Invalid XML format: {e}") from e


def parse_xml_file(path: str, encoding: str | None = None) -> etree._Element:
    """
    Parse an XML file.

    Args:
        path: File to read.
        encoding: Fallback character encoding, as for ``parse_xml``.

    Raises:
        ValueError: If the file is not well-formed XML.
    """
    return parse_xml(Path(path).read_bytes(), encoding)


def select_single(
    node: etree._Element, path: str, namespaces: dict[str, str] | None = None
) -> etree._Element | None:
    """Return the first child matching ``path`` (e.g. 'title' or 'atom:link')."""
    return node.find(path, namespaces=namespaces)


def select_all(
    node: etree._Element, path: str, namespaces: dict[str, str] | None = None
) -> list[etree._Element]:
    """Return all children matching ``path`` in document order."""
    return node.findall(path, namespaces=namespaces)


def node_value(node: etree._Element) -> str:
    """Concatenated text of the node and its descendants."""
    return str(node.xpath("string()"))


def get_attribute(
    node: etree._Element, name: str, namespace: str | None = None, default: str = ""
) -> str:
    """Attribute value, or ``default`` when the attribute is missing."""
    key = f"{{{namespace}}}{name}" if namespace else name
    return node.get(key, default)


def namespaces_in_scope(node: etree._Element) -> dict[str, str]:
    """Prefix to namespace URI map in scope at ``node``; '' is the default namespace."""
    return {prefix or "": uri for prefix, uri in node.nsmap.items()}


def local_name(node: etree._Element) -> str:
    """Element name without its namespace."""
    return etree.QName(node).localname


class SyndicationXmlWriter:
    """
    Writer that builds XML output element by element.

    Entities call ``start_element``/``end_element`` in document order; the
    result is serialized with ``to_string`` (fragment) or ``to_bytes``
    (document with declaration).
    """

    def __init__(self, minimize_output_size: bool = False):
        self.minimize_output_size = minimize_output_size
        self._roots: list[etree._Element] = []
        self._open: list[etree._Element] = []

    @property
    def current(self) -> etree._Element:
        """Element currently being written."""
        if not self._open:
            raise ValueError("No element is open")
        return self._open[-1]

    @property
    def depth(self) -> int:
        return len(self._open)

    def start_element(
        self,
        name: str,
        namespace: str | None = None,
        prefix: str | None = None,
        nsmap: dict[str | None, str] | None = None,
    ) -> etree._Element:
        """
        Open a new element under the current one.

        Args:
            name: Local name.
            namespace: Namespace URI, if any.
            prefix: Preferred prefix for ``namespace`` when it is not in scope yet.
            nsmap: Extra namespace declarations to place on this element.

        Returns:
            The new element.
        """
        ensure_not_empty(name, "name")
        tag = f"{{{namespace}}}{name}" if namespace else name

        declarations = dict(nsmap or {})
        in_scope = self._open[-1].nsmap if self._open else {}
        if namespace and prefix and namespace not in in_scope.values():
            declarations.setdefault(prefix, namespace)

        if self._open:
            element = etree.SubElement(self._open[-1], tag, nsmap=declarations or None)
        else:
            element = etree.Element(tag, nsmap=declarations or None)
            self._roots.append(element)
        self._open.append(element)
        return element

    def end_element(self) -> None:
        """Close the current element."""
        if not self._open:
            raise ValueError("end_element called with no open element")
        self._open.pop()

    def write_attribute(self, name: str, value: str, namespace: str | None = None) -> None:
        """Set an attribute on the current element."""
        key = f"{{{namespace}}}{name}" if namespace else name
        self.current.set(key, value)

    def write_string(self, text: str) -> None:
        """Append text content to the current element."""
        if not text:
            return
        element = self.current
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + text
        else:
            element.text = (element.text or "") + text

    def write_element_string(
        self,
        name: str,
        value: str,
        namespace: str | None = None,
        prefix: str | None = None,
    ) -> None:
        """Write ``<name>value</name>`` under the current element."""
        self.start_element(name, namespace, prefix)
        self.write_string(value)
        self.end_element()

    def to_string(self) -> str:
        """Serialize everything written so far as a fragment, without declaration."""
        pretty = not self.minimize_output_size
        return "".join(
            etree.tostring(root, encoding="unicode", pretty_print=pretty) for root in self._roots
        ).strip()

    def to_bytes(self, encoding: str = "utf-8", xml_declaration: bool = True) -> bytes:
        """
        Serialize the first written element as a document.

        Raises:
            ValueError: If nothing has been written.
        """
        if not self._roots:
            raise ValueError("Nothing has been written")
        return etree.tostring(
            self._roots[0],
            encoding=encoding,
            xml_declaration=xml_declaration,
            pretty_print=not self.minimize_output_size,
        )
