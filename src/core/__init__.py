"""
Core Layer - Shared contracts.

This package contains:
- Configuration management (settings.py)
- Resource handles (resource.py) - what loaders read from
- Core data types (types.py) - origins and property sources
"""

from src.core.resource import ByteArrayResource, FileSystemResource, Resource
from src.core.types import (
    MapPropertySource,
    OriginTrackedMapPropertySource,
    OriginTrackedValue,
    PropertySource,
    TextResourceOrigin,
)

__all__ = [
    "ByteArrayResource",
    "FileSystemResource",
    "MapPropertySource",
    "OriginTrackedMapPropertySource",
    "OriginTrackedValue",
    "PropertySource",
    "Resource",
    "TextResourceOrigin",
]
