"""Artifact identity: coordinates of a built Java artifact."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

DEFAULT_EXTENSION = "jar"
DEFAULT_VERSION = "SYSTEM"
UNKNOWN_VERSION = "UNKNOWN"
UNKNOWN_NAMESPACE = "UNKNOWN"

MF_KEY_GROUPID = "JavaPackages-GroupId"
MF_KEY_ARTIFACTID = "JavaPackages-ArtifactId"
MF_KEY_EXTENSION = "JavaPackages-Extension"
MF_KEY_CLASSIFIER = "JavaPackages-Classifier"
MF_KEY_VERSION = "JavaPackages-Version"


class Artifact(BaseModel):
    """Immutable artifact coordinate.

    ``group_id`` and ``artifact_id`` have no defaults.  They may be ``None``
    only while an identity is still being resolved; see :attr:`is_resolved`.
    Two artifacts are equal when groupId, artifactId, extension, classifier
    and version match.  The namespace is carried along but is not part of
    the identity.
    """

    group_id: str | None = Field(alias="groupId")
    artifact_id: str | None = Field(alias="artifactId")
    extension: str = DEFAULT_EXTENSION
    classifier: str = ""
    version: str = DEFAULT_VERSION
    namespace: str = ""

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def parse(cls, coordinates: str) -> Artifact:
        """Parse ``[namespace/]groupId:artifactId[:extension[:classifier]]:version``.

        Empty extension or version fields fall back to their defaults.
        """
        namespace = ""
        head, sep, _ = coordinates.partition(":")
        if sep and "/" in head:
            namespace, _, rest = coordinates.partition("/")
        else:
            rest = coordinates

        parts = rest.split(":")
        if len(parts) == 3:
            group_id, artifact_id, version = parts
            extension, classifier = "", ""
        elif len(parts) == 4:
            group_id, artifact_id, extension, version = parts
            classifier = ""
        elif len(parts) == 5:
            group_id, artifact_id, extension, classifier, version = parts
        else:
            raise ValueError(
                f"Bad artifact coordinates '{coordinates}', expected format is "
                "<groupId>:<artifactId>[:<extension>[:<classifier>]]:<version>"
            )
        if not group_id or not artifact_id:
            raise ValueError(f"Bad artifact coordinates '{coordinates}': empty groupId or artifactId")

        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            extension=extension or DEFAULT_EXTENSION,
            classifier=classifier,
            version=version or DEFAULT_VERSION,
            namespace=namespace,
        )

    @property
    def is_resolved(self) -> bool:
        return bool(self.group_id) and bool(self.artifact_id)

    @property
    def _key(self) -> tuple[str | None, str | None, str, str, str]:
        return (self.group_id, self.artifact_id, self.extension, self.classifier, self.version)

    def with_version(self, version: str) -> Artifact:
        return self.model_copy(update={"version": version})

    def with_namespace(self, namespace: str) -> Artifact:
        return self.model_copy(update={"namespace": namespace})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artifact):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        prefix = f"{self.namespace}/" if self.namespace else ""
        coords = f"{self.group_id}:{self.artifact_id}"
        if self.classifier:
            coords += f":{self.extension}:{self.classifier}"
        elif self.extension != DEFAULT_EXTENSION:
            coords += f":{self.extension}"
        return f"{prefix}{coords}:{self.version}"


# Dependencies on either of these are dropped when metadata is written.
DUMMY = Artifact.parse("org.fedoraproject.xmvn:xmvn-void:SYSTEM")
DUMMY_JPP = Artifact.parse("JPP/maven:empty-dep:SYSTEM")

_VOID_KEYS = frozenset(
    {
        ("org.fedoraproject.xmvn", "xmvn-void"),
        ("JPP/maven", "empty-dep"),
    }
)


def is_void(artifact: Artifact) -> bool:
    """Return True if *artifact* is one of the "no dependency" sentinels.

    Matching is on groupId/artifactId only, with the namespace folded into
    the groupId, so ``JPP/maven:empty-dep`` matches whether the ``JPP``
    prefix was parsed as a namespace or left in the groupId.
    """
    group_id = artifact.group_id or ""
    if (group_id, artifact.artifact_id) in _VOID_KEYS:
        return True
    if artifact.namespace:
        return (f"{artifact.namespace}/{group_id}", artifact.artifact_id) in _VOID_KEYS
    return False


def collection_to_string(artifacts: Iterable[Artifact], multi_line: bool = False) -> str:
    """Render artifacts as ``[ a, b ]`` or, multi-line, one per indented line."""
    items = [str(a) for a in artifacts]
    if not items:
        return "[]"

    separator = "\n" if multi_line else " "
    indent = "  " if multi_line else ""
    body = ("," + separator).join(indent + item for item in items)
    return f"[{separator}{body}{separator}]"
