"""Reader for Java ``.properties`` text, as written into ``pom.properties``."""

from __future__ import annotations

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"


def _logical_lines(text: str) -> list[str]:
    """Join backslash-continued physical lines, dropping comments and blanks."""
    lines: list[str] = []
    pending: str | None = None

    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        else:
            line = pending + line
            pending = None

        # An odd number of trailing backslashes continues the line.
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue
        lines.append(line)

    if pending is not None:
        lines.append(pending)
    return lines


def _unescape(value: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != "\\" or i + 1 == len(value):
            out.append(ch)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == "u" and i + 6 <= len(value):
            try:
                out.append(chr(int(value[i + 2 : i + 6], 16)))
            except ValueError:
                raise ValueError(f"Malformed \\uxxxx encoding in {value!r}") from None
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split_key_value(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]

    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict; a repeated key keeps its last value."""
    return dict(_split_key_value(line) for line in _logical_lines(text))


def load_properties(data: bytes) -> dict[str, str]:
    """Parse raw ``.properties`` bytes (ISO-8859-1, as Java writes them)."""
    return parse_properties(data.decode("iso-8859-1"))
