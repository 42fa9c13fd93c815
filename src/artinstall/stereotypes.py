"""Artifact type stereotypes — map Maven packaging types to extension/classifier pairs."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from artinstall.models.artifact import DEFAULT_EXTENSION, DEFAULT_VERSION, Artifact


@dataclass(frozen=True)
class StereotypeEntry:
    """A named artifact type and the concrete extension/classifier it stands for."""

    type_name: str
    extension: str
    classifier: str
    language: str = "java"


def _build_table(*entries: tuple[str, str, str]) -> MappingProxyType[str, StereotypeEntry]:
    return MappingProxyType(
        {name: StereotypeEntry(name, extension, classifier) for name, extension, classifier in entries}
    )


# Taken from MavenRepositorySystemUtils in maven-aether-provider.
STEREOTYPES = _build_table(
    ("maven-plugin", "jar", ""),
    ("ejb", "jar", ""),
    ("ejb-client", "jar", "client"),
    ("test-jar", "jar", "tests"),
    ("javadoc", "jar", "javadoc"),
    ("java-source", "jar", "sources"),
)


def lookup(type_name: str | None) -> StereotypeEntry | None:
    """Return the stereotype registered for *type_name*, or ``None``."""
    if type_name is None:
        return None
    return STEREOTYPES.get(type_name)


def create_typed_artifact(
    group_id: str | None,
    artifact_id: str | None,
    type: str | None,
    classifier: str | None,
    version: str | None,
) -> Artifact:
    """Build an artifact from Maven coordinates where *type* may be a stereotype.

    A plain type such as ``pom`` or ``war`` is used as the extension.  A
    stereotype replaces the extension and supplies a classifier unless the
    caller gave a non-empty one.
    """
    extension = type if type is not None else DEFAULT_EXTENSION

    stereotype = lookup(type)
    if stereotype is not None:
        extension = stereotype.extension
        if not classifier:
            classifier = stereotype.classifier

    return Artifact(
        group_id=group_id,
        artifact_id=artifact_id,
        extension=extension,
        classifier=classifier or "",
        version=version if version is not None else DEFAULT_VERSION,
    )
