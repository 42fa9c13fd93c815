"""Resolve an artifact identity from the contents of an installed archive.

Two strategies are tried in order and the first one to produce an identity
wins:

1. ``JavaPackages-*`` attributes in the main section of the JAR manifest.
2. The first ``META-INF/maven/**/pom.properties`` entry in archive order.

A strategy that cannot read or parse what it needs simply yields nothing.
Only an I/O error on the archive itself (missing file, permission denied)
is logged, and resolution then gives up.
"""

from __future__ import annotations

import logging
import re
import zipfile
import zlib
from collections.abc import Callable, Iterator
from pathlib import Path

from artinstall.archive.manifest import ManifestError, read_manifest
from artinstall.archive.properties import load_properties
from artinstall.models.artifact import (
    DEFAULT_EXTENSION,
    DEFAULT_VERSION,
    MF_KEY_ARTIFACTID,
    MF_KEY_CLASSIFIER,
    MF_KEY_EXTENSION,
    MF_KEY_GROUPID,
    MF_KEY_VERSION,
    UNKNOWN_VERSION,
    Artifact,
)

logger = logging.getLogger("artinstall.archive")

POM_PROPERTIES_RE = re.compile(r"META-INF/maven/.*?/pom\.properties")

# Errors that mean "this strategy cannot read the archive", as opposed to the
# archive being unreachable altogether (OSError).
_UNREADABLE = (zipfile.BadZipFile, zlib.error, ManifestError, ValueError, NotImplementedError)

Strategy = Callable[[Path, str], Artifact | None]


def from_manifest(path: Path, extension: str = DEFAULT_EXTENSION) -> Artifact | None:
    """Read the identity from ``JavaPackages-*`` manifest attributes.

    *extension* is unused; manifest values are authoritative as written.
    """
    try:
        with zipfile.ZipFile(path) as archive:
            manifest = read_manifest(archive)
    except _UNREADABLE as exc:
        logger.debug("No usable manifest in %s: %s", path, exc)
        return None

    if manifest is None:
        return None

    group_id = manifest.get(MF_KEY_GROUPID)
    artifact_id = manifest.get(MF_KEY_ARTIFACTID)
    if not group_id or not artifact_id:
        return None

    return Artifact(
        group_id=group_id,
        artifact_id=artifact_id,
        extension=manifest.get(MF_KEY_EXTENSION, DEFAULT_EXTENSION),
        classifier=manifest.get(MF_KEY_CLASSIFIER, ""),
        version=manifest.get(MF_KEY_VERSION, DEFAULT_VERSION),
    )


def _pom_properties_entries(archive: zipfile.ZipFile) -> Iterator[zipfile.ZipInfo]:
    """Yield ``pom.properties`` entries lazily, in the order they are stored."""
    for info in archive.infolist():
        if POM_PROPERTIES_RE.fullmatch(info.filename):
            yield info


def from_pom_properties(path: Path, extension: str = DEFAULT_EXTENSION) -> Artifact | None:
    """Read the identity from the first usable embedded ``pom.properties``.

    Archives carry no type information here, so *extension* comes from the
    caller.  A malformed entry, or one without ``groupId`` or ``artifactId``,
    is skipped; a missing ``version`` becomes :data:`UNKNOWN_VERSION`.
    """
    try:
        with zipfile.ZipFile(path) as archive:
            for info in _pom_properties_entries(archive):
                try:
                    properties = load_properties(archive.read(info))
                except ValueError as exc:
                    logger.debug("Ignoring malformed %s in %s: %s", info.filename, path, exc)
                    continue
                group_id = properties.get("groupId")
                artifact_id = properties.get("artifactId")
                if not group_id or not artifact_id:
                    logger.debug("Ignoring incomplete %s in %s", info.filename, path)
                    continue
                return Artifact(
                    group_id=group_id,
                    artifact_id=artifact_id,
                    extension=extension,
                    version=properties.get("version") or UNKNOWN_VERSION,
                )
    except _UNREADABLE as exc:
        logger.debug("Cannot scan %s for pom.properties: %s", path, exc)
    return None


STRATEGIES: tuple[Strategy, ...] = (from_manifest, from_pom_properties)


def resolve_archive_identity(
    path: Path | str, fallback_extension: str = DEFAULT_EXTENSION
) -> Artifact | None:
    """Return the identity of the archive at *path*, or ``None`` if unresolvable."""
    path = Path(path)
    for strategy in STRATEGIES:
        try:
            artifact = strategy(path, fallback_extension)
        except OSError:
            logger.error("Failed to get artifact definition from file %s", path, exc_info=True)
            return None
        if artifact is not None:
            return artifact
    return None
