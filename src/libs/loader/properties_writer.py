"""Render mappings in the line-oriented `.properties` format.

Output is pure ASCII: anything outside printable ASCII is written as
`\\uXXXX`, so it reads back the same whatever encoding the reader uses.
"""

from __future__ import annotations

from typing import Mapping

_SPECIAL = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}
_ESCAPED_LITERALS = frozenset("\\=:#!")


def _escape(text: str, escape_all_spaces: bool) -> str:
    out: list[str] = []
    for index, char in enumerate(text):
        if char == " ":
            out.append("\\ " if escape_all_spaces or index == 0 else " ")
        elif char in _SPECIAL:
            out.append(_SPECIAL[char])
        elif char in _ESCAPED_LITERALS:
            out.append("\\" + char)
        elif " " < char <= "~":
            out.append(char)
        else:
            encoded = char.encode("utf-16-be", "surrogatepass")
            for offset in range(0, len(encoded), 2):
                out.append(f"\\u{int.from_bytes(encoded[offset:offset + 2], 'big'):04X}")
    return "".join(out)


def escape_key(key: str) -> str:
    return _escape(key, escape_all_spaces=True)


def escape_value(value: str) -> str:
    return _escape(value, escape_all_spaces=False)


def dumps(properties: Mapping[str, str]) -> str:
    """Render `properties` as `key=value` lines, one per entry."""

    lines = [f"{escape_key(key)}={escape_value(value)}" for key, value in properties.items()]
    return "".join(line + "\n" for line in lines)
