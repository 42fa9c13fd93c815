"""Installer — turns an installation plan into installed packages and descriptors."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from artinstall.archive.resolver import resolve_archive_identity
from artinstall.install.files import RegularFile
from artinstall.install.package import JavaPackage
from artinstall.metadata.model import ArtifactMetadata
from artinstall.models.artifact import Artifact
from artinstall.plan import InstallationPlan, PlanError, PlannedArtifact
from artinstall.settings import Settings
from artinstall.stereotypes import create_typed_artifact

logger = logging.getLogger("artinstall.installer")

_DEFAULT_PACKAGE_NAME = "default"


class Installer:
    """Resolves planned artifacts, lays them out and installs their packages.

    Stateless apart from its settings; one instance can install many plans.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()

    # -- layout --------------------------------------------------------------

    def metadata_path(self, package_id: str) -> PurePosixPath:
        name = package_id or _DEFAULT_PACKAGE_NAME
        return PurePosixPath(self._settings.metadata_dir) / f"{name}.xml"

    def artifact_path(self, package_id: str, artifact: Artifact) -> PurePosixPath:
        """Return ``<java_dir>/[<package>/]<artifactId>[-<classifier>].<extension>``."""
        base = PurePosixPath(self._settings.java_dir)
        if package_id:
            base /= package_id
        name = artifact.artifact_id or ""
        if artifact.classifier:
            name += f"-{artifact.classifier}"
        return base / f"{name}.{artifact.extension}"

    # -- resolution ----------------------------------------------------------

    def resolve(self, planned: PlannedArtifact, archive: Path) -> Artifact | None:
        """Identity from the plan's coordinates if given, else from the archive."""
        typed = create_typed_artifact(
            planned.group_id, planned.artifact_id, planned.type, planned.classifier, planned.version
        )
        if planned.has_coordinates:
            return typed

        extension = typed.extension if planned.type is not None else self._settings.default_extension
        artifact = resolve_archive_identity(archive, extension)
        if artifact is not None and planned.version is not None:
            artifact = artifact.with_version(planned.version)
        return artifact

    # -- packages ------------------------------------------------------------

    def build_packages(self, plan: InstallationPlan) -> list[JavaPackage]:
        packages: list[JavaPackage] = []
        for package_index, planned_package in enumerate(plan.packages):
            package = JavaPackage(planned_package.id, self.metadata_path(planned_package.id))

            for index, planned in enumerate(planned_package.artifacts):
                location = f"packages[{package_index}].artifacts[{index}]"
                archive = plan.archive_path(planned)
                artifact = self.resolve(planned, archive)
                if artifact is None or not artifact.is_resolved:
                    logger.warning("Skipping %s: unable to determine artifact identity", archive)
                    continue

                try:
                    aliases = [Artifact.parse(a) for a in planned.aliases]
                    dependencies = [Artifact.parse(d) for d in planned.dependencies]
                except ValueError as exc:
                    raise PlanError(str(exc), location) from exc
                try:
                    content = archive.read_bytes()
                except OSError as exc:
                    raise PlanError(f"cannot read archive {archive}: {exc.strerror or exc}", location) from exc

                installed = self.artifact_path(package.id, artifact)
                package.add_file(RegularFile(installed, content))
                package.metadata.artifacts.append(
                    ArtifactMetadata(
                        artifact=artifact,
                        path=f"/{installed}",
                        aliases=aliases,
                        dependencies=dependencies,
                    )
                )
                logger.debug("Artifact %s -> /%s", artifact, installed)

            packages.append(package)
        return packages

    def install(
        self,
        plan: InstallationPlan,
        root: Path,
        descriptor_dir: Path | None = None,
    ) -> list[JavaPackage]:
        """Install every package of *plan* below *root*.

        When *descriptor_dir* is given, each package's descriptor is written
        there as ``.mfiles`` (default package) or ``.mfiles-<id>``.
        """
        packages = self.build_packages(plan)
        for package in packages:
            package.install(root)
            if descriptor_dir is not None:
                descriptor_dir.mkdir(parents=True, exist_ok=True)
                package.write_descriptor(descriptor_dir / self._settings.descriptor_name(package.id))
            logger.info(
                "Installed package '%s' with %d artifact(s) into %s",
                package.id or _DEFAULT_PACKAGE_NAME,
                len(package.metadata.artifacts),
                root,
            )
        return packages
