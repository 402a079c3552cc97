"""Origin-tracking parser for Java-style `.properties` files.

Grammar notes:
- Leading whitespace of each physical line is ignored; `#` and `!` start a
  comment line.
- A key ends at the first unescaped `=`, `:` or whitespace. The key is
  trimmed of control characters and spaces; leading whitespace of the
  value is skipped, trailing is kept.
- Escapes: `\\t \\n \\r \\f \\uXXXX`; a backslash before a line end joins the
  next line; any other escaped character stands for itself.
- Keys ending in `[]` are expanded into `key[0]`, `key[1]`, ... when list
  expansion is enabled.

Every value records the 1-based line and column of its first character.
"""

from __future__ import annotations

import re

from src.core.resource import Resource
from src.core.settings import DEFAULT_PROPERTIES_ENCODING
from src.core.types import OriginTrackedValue, TextResourceOrigin
from src.libs.loader.errors import PropertiesFormatError

_WHITESPACE = frozenset(" \t\f")
_ESCAPES = {"t": "\t", "r": "\r", "n": "\n", "f": "\f"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")
# Characters up to and including space, removed when trimming keys
_KEY_TRIM = "".join(map(chr, range(33)))


def _join(buffer: list[str]) -> str:
    text = "".join(buffer)
    # \uXXXX pairs may encode a surrogate pair; fold them back into one character.
    if _SURROGATE_RE.search(text):
        text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return text


class _CharacterReader:
    """Reads logical characters, resolving escapes and continuations."""

    def __init__(self, text: str, resource: str) -> None:
        self._text = text.replace("\r\n", "\n").replace("\r", "\n")
        self._resource = resource
        self._pos = -1
        self._line = 1
        self._column = 0
        self._last_raw: str | None = None
        self.character: str | None = None
        self.escaped = False
        self.line = 1
        self.column = 1

    def _next_raw(self) -> str | None:
        if self._last_raw == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        self._pos += 1
        raw = self._text[self._pos] if self._pos < len(self._text) else None
        self._last_raw = raw
        return raw

    def read(self, wrapped_line: bool = False) -> bool:
        self.escaped = False
        raw = self._next_raw()
        if self._column == 1:
            while raw is not None and raw in _WHITESPACE:
                raw = self._next_raw()
            if not wrapped_line and raw in ("#", "!"):
                while raw is not None and raw != "\n":
                    raw = self._next_raw()
        self.character = raw
        self.line = self._line
        self.column = self._column
        if raw == "\\":
            return self._read_escaped()
        return not self.is_end_of_file()

    def _read_escaped(self) -> bool:
        self.escaped = True
        raw = self._next_raw()
        if raw is None:
            self.character = None
        elif raw in _ESCAPES:
            self.character = _ESCAPES[raw]
        elif raw == "\n":
            return self.read(wrapped_line=True)
        elif raw == "u":
            self.character = self._read_unicode()
        else:
            self.character = raw
        return not self.is_end_of_file()

    def _read_unicode(self) -> str:
        digits = []
        for _ in range(4):
            raw = self._next_raw()
            if raw is None or raw not in _HEX_DIGITS:
                raise PropertiesFormatError(
                    "Malformed \\uxxxx encoding",
                    resource=self._resource,
                    line=self.line,
                    column=self.column,
                )
            digits.append(raw)
        return chr(int("".join(digits), 16))

    def is_white_space(self) -> bool:
        return not self.escaped and self.character is not None and self.character in _WHITESPACE

    def is_end_of_file(self) -> bool:
        return self.character is None

    def is_end_of_line(self) -> bool:
        return self.character is None or (not self.escaped and self.character == "\n")

    def is_property_delimiter(self) -> bool:
        return not self.escaped and self.character in ("=", ":")

    def is_list_delimiter(self) -> bool:
        return not self.escaped and self.character == ","

    def origin(self) -> TextResourceOrigin:
        return TextResourceOrigin(self._resource, self.line, self.column)


class OriginTrackedPropertiesLoader:
    """Loads a `.properties` resource into ordered `OriginTrackedValue` entries."""

    def __init__(
        self,
        resource: Resource,
        encoding: str = DEFAULT_PROPERTIES_ENCODING,
        expand_lists: bool = True,
    ) -> None:
        self.resource = resource
        self.encoding = encoding
        self.expand_lists = expand_lists

    def load(self) -> dict[str, OriginTrackedValue]:
        """Read and parse the resource; I/O errors propagate unchanged."""

        content = self.resource.read_bytes()
        description = self.resource.description
        try:
            text = content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise PropertiesFormatError(
                f"Cannot decode properties as {self.encoding}: {e.reason}",
                resource=description,
            ) from e
        return self.parse(text, description)

    def parse(self, text: str, description: str) -> dict[str, OriginTrackedValue]:
        reader = _CharacterReader(text, description)
        result: dict[str, OriginTrackedValue] = {}
        while reader.read():
            key = self._load_key(reader).strip(_KEY_TRIM)
            if self.expand_lists and key.endswith("[]"):
                key = key[:-2]
                index = 0
                while True:
                    value = self._load_value(reader, split_lists=True)
                    self._put(result, f"{key}[{index}]", value)
                    index += 1
                    if not reader.is_end_of_line():
                        reader.read()
                    if reader.is_end_of_line():
                        break
            else:
                value = self._load_value(reader, split_lists=False)
                self._put(result, key, value)
        return result

    @staticmethod
    def _put(result: dict[str, OriginTrackedValue], key: str, value: OriginTrackedValue) -> None:
        if key:
            result[key] = value

    @staticmethod
    def _load_key(reader: _CharacterReader) -> str:
        buffer: list[str] = []
        previous_whitespace = False
        while not reader.is_end_of_line():
            if reader.is_property_delimiter():
                reader.read()
                return _join(buffer)
            if not reader.is_white_space() and previous_whitespace:
                return _join(buffer)
            previous_whitespace = reader.is_white_space()
            buffer.append(reader.character)
            reader.read()
        return _join(buffer)

    @staticmethod
    def _load_value(reader: _CharacterReader, split_lists: bool) -> OriginTrackedValue:
        buffer: list[str] = []
        while reader.is_white_space() and not reader.is_end_of_line():
            reader.read()
        origin = reader.origin()
        while not reader.is_end_of_line() and not (split_lists and reader.is_list_delimiter()):
            buffer.append(reader.character)
            reader.read()
        return OriginTrackedValue(_join(buffer), origin)
