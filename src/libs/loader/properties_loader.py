"""Loader for `.properties` and `.xml` property files."""

from __future__ import annotations

from src.core.resource import Resource
from src.core.settings import Settings
from src.core.types import MapPropertySource, OriginTrackedMapPropertySource
from src.libs.loader.base_loader import BasePropertySourceLoader
from src.libs.loader.origin_tracked_properties import OriginTrackedPropertiesLoader
from src.libs.loader.xml_properties import load_xml_properties
from src.observability.logger import get_logger

XML_FILE_EXTENSION = ".xml"

logger = get_logger("propsource.loader")


class PropertiesPropertySourceLoader(BasePropertySourceLoader):
    """Strategy to load `.properties` and `.xml` files into a property source.

    `.xml` files are read as plain key/value pairs; everything else goes
    through the origin-tracking line parser. An empty file yields no source.
    """

    FILE_EXTENSIONS = ("properties", "xml")

    def __init__(
        self,
        settings: Settings | None = None,
        encoding: str | None = None,
        expand_lists: bool | None = None,
    ) -> None:
        super().__init__(settings=settings)
        loader_settings = self.settings.loader
        self.encoding = encoding or loader_settings.properties_encoding
        self.expand_lists = (
            loader_settings.expand_lists if expand_lists is None else expand_lists
        )

    def get_file_extensions(self) -> list[str]:
        return list(self.FILE_EXTENSIONS)

    def load(self, name: str, resource: Resource) -> list[MapPropertySource]:
        self._validate_name(name)
        filename = resource.filename
        if filename is not None and filename.lower().endswith(XML_FILE_EXTENSION):
            source: MapPropertySource = MapPropertySource(
                name=name, source=load_xml_properties(resource)
            )
            fmt = "xml"
        else:
            values = OriginTrackedPropertiesLoader(
                resource, encoding=self.encoding, expand_lists=self.expand_lists
            ).load()
            source = OriginTrackedMapPropertySource.from_tracked_values(name, values)
            fmt = "properties"

        logger.debug(
            "Loaded %d properties from %s (name=%s, format=%s)",
            len(source),
            resource.description,
            name,
            fmt,
        )
        if len(source) == 0:
            return []
        return [source]
