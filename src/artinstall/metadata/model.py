"""Package metadata records written alongside installed artifacts."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from artinstall.models.artifact import Artifact, is_void


def _new_uuid() -> str:
    return str(uuid.uuid4())


class ArtifactMetadata(BaseModel):
    """Installed artifact: its identity, where it lives and what it needs."""

    artifact: Artifact
    path: str | None = None
    aliases: list[Artifact] = []
    dependencies: list[Artifact] = []
    properties: dict[str, str] = {}

    @property
    def effective_dependencies(self) -> list[Artifact]:
        """Dependencies with the "no dependency" sentinels removed."""
        return [dep for dep in self.dependencies if not is_void(dep)]


class PackageMetadata(BaseModel):
    """Metadata document of one package.

    Fields are mutable until the package is installed; whatever is set at
    that point is what ends up in the metadata file.
    """

    uuid: str = Field(default_factory=_new_uuid)
    artifacts: list[ArtifactMetadata] = []
    properties: dict[str, str] = {}

    model_config = {"validate_assignment": True}
