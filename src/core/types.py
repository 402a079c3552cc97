"""Core data types shared by the property file loaders.

These types are the contract between the parsers and whatever consumes the
loaded configuration.

Rules:
- property sources are immutable once created
- origins are kept in a side table, values stay plain strings
- types are JSON-serializable via to_dict()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class TextResourceOrigin:
    """Where a value was defined: resource description plus 1-based line/column."""

    resource: str
    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("origin line must be >= 1")
        if self.column < 1:
            raise ValueError("origin column must be >= 1")

    def __str__(self) -> str:
        return f"{self.resource} - {self.line}:{self.column}"

    def to_dict(self) -> dict[str, Any]:
        return {"resource": self.resource, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class OriginTrackedValue:
    """A parsed value together with the place it came from."""

    value: str
    origin: TextResourceOrigin | None = None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MapPropertySource:
    """A named, ordered, read-only mapping of property keys to values."""

    name: str
    source: Mapping[str, str]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Property source name cannot be empty")
        # Private copy so later changes to the caller's dict are not visible.
        object.__setattr__(self, "source", MappingProxyType(dict(self.source)))

    @property
    def origin_tracked(self) -> bool:
        return False

    @property
    def property_names(self) -> list[str]:
        return list(self.source.keys())

    def get_property(self, key: str) -> str | None:
        return self.source.get(key)

    def contains_property(self, key: str) -> bool:
        return key in self.source

    def get_origin(self, key: str) -> TextResourceOrigin | None:
        return None

    def __len__(self) -> int:
        return len(self.source)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "origin_tracked": self.origin_tracked,
            "properties": dict(self.source),
        }


@dataclass(frozen=True)
class OriginTrackedMapPropertySource(MapPropertySource):
    """A `MapPropertySource` that also knows where each value was defined."""

    origins: Mapping[str, TextResourceOrigin] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__post_init__()
        unknown = [key for key in self.origins if key not in self.source]
        if unknown:
            raise ValueError(f"Origins given for unknown properties: {', '.join(unknown)}")
        object.__setattr__(self, "origins", MappingProxyType(dict(self.origins)))

    @property
    def origin_tracked(self) -> bool:
        return True

    def get_origin(self, key: str) -> TextResourceOrigin | None:
        return self.origins.get(key)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["origins"] = {key: origin.to_dict() for key, origin in self.origins.items()}
        return payload

    @classmethod
    def from_tracked_values(
        cls,
        name: str,
        values: Mapping[str, OriginTrackedValue] | Iterable[tuple[str, OriginTrackedValue]],
    ) -> "OriginTrackedMapPropertySource":
        items = values.items() if isinstance(values, Mapping) else values
        source: dict[str, str] = {}
        origins: dict[str, TextResourceOrigin] = {}
        for key, tracked in items:
            source[key] = tracked.value
            if tracked.origin is not None:
                origins[key] = tracked.origin
            else:
                origins.pop(key, None)
        return cls(name=name, source=source, origins=origins)


PropertySource = MapPropertySource
