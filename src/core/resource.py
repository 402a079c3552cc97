"""Readable resource handles.

A resource is anything that can hand out its bytes, optionally with a file
name. Loaders only read from it and never keep a reference after `load`.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class Resource(ABC):
    """Abstract handle to readable byte content."""

    @property
    @abstractmethod
    def filename(self) -> str | None:
        """File name used for format detection, or None when unknown."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable description, used in origins and error messages."""

    @abstractmethod
    def open(self) -> BinaryIO:
        """Open a fresh binary stream; the caller closes it."""

    def exists(self) -> bool:
        return True

    def read_bytes(self) -> bytes:
        with self.open() as stream:
            return stream.read()

    def __str__(self) -> str:
        return self.description


class FileSystemResource(Resource):
    """Resource backed by a file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def filename(self) -> str | None:
        return self.path.name or None

    @property
    def description(self) -> str:
        return f"file [{self.path}]"

    def exists(self) -> bool:
        return self.path.is_file()

    def open(self) -> BinaryIO:
        if self.path.exists() and not self.path.is_file():
            raise IsADirectoryError(f"Path is not a file: {self.path}")
        return self.path.open("rb")


class ByteArrayResource(Resource):
    """In-memory resource, mostly useful for tests and generated content.

    Text content must come with the `encoding` it should be stored in, since
    loaders decode the bytes with their own configured charset.
    """

    def __init__(
        self,
        content: bytes | str,
        filename: str | None = None,
        description: str | None = None,
        encoding: str | None = None,
    ) -> None:
        if isinstance(content, str):
            if encoding is None:
                raise TypeError(
                    "ByteArrayResource needs an explicit encoding for str content"
                )
            content = content.encode(encoding)
        self.content = bytes(content)
        self._filename = filename
        self._description = description

    @property
    def filename(self) -> str | None:
        return self._filename

    @property
    def description(self) -> str:
        if self._description:
            return self._description
        if self._filename:
            return f"byte array resource [{self._filename}]"
        return "byte array resource"

    def open(self) -> BinaryIO:
        return io.BytesIO(self.content)
