"""Errors raised while reading property files."""

from __future__ import annotations


class PropertiesFormatError(OSError):
    """Raised when a property file cannot be parsed.

    Subclasses OSError so callers that only handle I/O failures still see
    malformed files as a failed read.
    """

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.message = message
        self.resource = resource
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.resource is None:
            return self.message
        if self.line is None:
            return f"{self.message} ({self.resource})"
        column = f":{self.column}" if self.column is not None else ""
        return f"{self.message} ({self.resource} - {self.line}{column})"

    def __str__(self) -> str:
        return self._format()
