"""Reader for the XML properties format.

Expected shape:

    <?xml version="1.0" encoding="UTF-8"?>
    <!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">
    <properties>
      <comment>optional</comment>
      <entry key="server.port">8080</entry>
    </properties>

Values are plain strings; the XML parser does not expose reliable positions,
so no origins are recorded.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from src.core.resource import Resource
from src.libs.loader.errors import PropertiesFormatError

ROOT_TAG = "properties"
ENTRY_TAG = "entry"
COMMENT_TAG = "comment"


def parse_xml_properties(content: bytes | str, description: str = "xml content") -> dict[str, str]:
    """Parse an XML properties document into an ordered dict."""

    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        line, column = e.position
        raise PropertiesFormatError(
            f"Malformed XML properties: {e}",
            resource=description,
            line=line,
            column=column + 1,
        ) from e

    if root.tag != ROOT_TAG:
        raise PropertiesFormatError(
            f"Invalid XML properties root element: expected <{ROOT_TAG}>, got <{root.tag}>",
            resource=description,
        )

    properties: dict[str, str] = {}
    for index, element in enumerate(root):
        if element.tag == COMMENT_TAG:
            continue
        if element.tag != ENTRY_TAG:
            raise PropertiesFormatError(
                f"Unexpected element <{element.tag}> at position {index} in <{ROOT_TAG}>",
                resource=description,
            )
        key = element.get("key")
        if key is None:
            raise PropertiesFormatError(
                f"<{ENTRY_TAG}> at position {index} is missing the 'key' attribute",
                resource=description,
            )
        if len(element):
            raise PropertiesFormatError(
                f"<{ENTRY_TAG} key=\"{key}\"> must contain text only, found <{element[0].tag}>",
                resource=description,
            )
        properties[key] = element.text or ""
    return properties


def load_xml_properties(resource: Resource) -> dict[str, str]:
    """Read a resource fully and parse it as XML properties."""

    return parse_xml_properties(resource.read_bytes(), resource.description)
