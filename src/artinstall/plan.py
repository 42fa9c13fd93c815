"""Installation plan: which built archives go into which package.

A plan is a small YAML document::

    packages:
      - id: foo
        artifacts:
          - file: target/foo.jar
            groupId: org.example
            artifactId: foo
            type: test-jar
            version: "1.0"
            aliases: ["foo:foo-alias:SYSTEM"]
            dependencies: ["org.dep:dep:1.0"]

Coordinates are optional; an artifact without ``groupId``/``artifactId`` has
its identity read from the archive itself at install time.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError


class PlanError(Exception):
    """Raised when a plan cannot be read or does not have the expected shape."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class PlannedArtifact(BaseModel):
    """One archive to install, with optional explicit coordinates."""

    file: str
    group_id: str | None = Field(None, alias="groupId")
    artifact_id: str | None = Field(None, alias="artifactId")
    type: str | None = None
    classifier: str | None = None
    version: str | None = None
    aliases: list[str] = []
    dependencies: list[str] = []

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @property
    def has_coordinates(self) -> bool:
        return bool(self.group_id) and bool(self.artifact_id)


class PlannedPackage(BaseModel):
    id: str = ""
    artifacts: list[PlannedArtifact] = []

    model_config = {"extra": "forbid"}


class InstallationPlan(BaseModel):
    """All packages of a plan.  Relative archive paths resolve against ``base_dir``."""

    packages: list[PlannedPackage] = []
    base_dir: Path = Path(".")

    model_config = {"extra": "forbid"}

    def archive_path(self, artifact: PlannedArtifact) -> Path:
        return self.base_dir / artifact.file


def _format_location(loc: tuple[int | str, ...]) -> str:
    out = ""
    for part in loc:
        out += f"[{part}]" if isinstance(part, int) else (f".{part}" if out else str(part))
    return out


class PlanLoader:
    """Reads installation plans from YAML files or strings."""

    def __init__(self) -> None:
        self._yaml = YAML(typ="safe", pure=True)

    def load(self, path: Path) -> InstallationPlan:
        """Load a plan file; archive paths are taken relative to its directory."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, base_dir=path.parent)

    def load_string(self, content: str, base_dir: Path | None = None) -> InstallationPlan:
        try:
            data: Any = self._yaml.load(content)
        except YAMLError as exc:
            raise PlanError(f"invalid YAML: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PlanError("plan must be a mapping with a 'packages' list")

        try:
            plan = InstallationPlan.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            raise PlanError(first["msg"], _format_location(first["loc"])) from exc

        if base_dir is not None:
            plan = plan.model_copy(update={"base_dir": base_dir})
        return plan
