"""Base property source loader contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.core.resource import Resource
from src.core.settings import Settings
from src.core.types import MapPropertySource


class BasePropertySourceLoader(ABC):
    """Abstract loader turning a resource into zero or more property sources."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    @abstractmethod
    def get_file_extensions(self) -> list[str]:
        """File extensions (without the dot) this loader understands."""

    def supported_extensions(self) -> frozenset[str]:
        return frozenset(ext.lower() for ext in self.get_file_extensions())

    @staticmethod
    def _validate_name(name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Property source name cannot be empty")
        return name

    @abstractmethod
    def load(self, name: str, resource: Resource) -> list[MapPropertySource]:
        """Load `resource` into property sources named after `name`."""
