"""JAR manifest reader — main-section attributes of ``META-INF/MANIFEST.MF``."""

from __future__ import annotations

import re
import zipfile

MANIFEST_NAME = "META-INF/MANIFEST.MF"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class ManifestError(ValueError):
    """Raised when a manifest header line cannot be parsed."""


def parse_manifest(text: str) -> dict[str, str]:
    """Parse the main section of a manifest into a name → value mapping.

    Continuation lines start with a single space and are appended to the
    previous value.  The main section ends at the first blank line; later
    per-entry sections are ignored.
    """
    attributes: dict[str, str] = {}
    name: str | None = None

    for lineno, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        if not line:
            break
        if line.startswith(" "):
            if name is None:
                raise ManifestError(f"line {lineno}: continuation without a header")
            attributes[name] += line[1:]
            continue
        key, sep, value = line.partition(":")
        if not sep or not key or (value and not value.startswith(" ")):
            raise ManifestError(f"line {lineno}: invalid header field {line!r}")
        name = key
        attributes[name] = value[1:]

    return attributes


def read_manifest(archive: zipfile.ZipFile) -> dict[str, str] | None:
    """Return the main manifest attributes of *archive*, or ``None`` if it has none."""
    for info in archive.infolist():
        if info.filename.upper() == MANIFEST_NAME:
            raw = archive.read(info)
            return parse_manifest(raw.decode("utf-8"))
    return None
