"""Java package assembly — member files, metadata and the file-list descriptor."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath, PurePosixPath

from artinstall.install.files import (
    DEFAULT_FILE_MODE,
    FileEntry,
    describe,
    descriptor_line,
    ensure_directories,
    materialize,
    normalize_path,
)
from artinstall.metadata.model import PackageMetadata
from artinstall.metadata.serialization import write_metadata

logger = logging.getLogger("artinstall.install")


class DuplicatePathError(ValueError):
    """Raised when a file is added at a path the package already owns."""

    def __init__(self, package_id: str, path: PurePosixPath) -> None:
        self.package_id = package_id
        self.path = path
        super().__init__(f"Package '{package_id}' already contains a file at /{path}")


class InstallError(OSError):
    """Raised when a package member cannot be written to the installation root.

    *path* is the member path relative to the root, or the root itself when
    the root cannot be created.
    """

    def __init__(self, path: PurePosixPath | Path, cause: OSError) -> None:
        self.path = path
        shown = str(path) if isinstance(path, Path) else f"/{path}"
        super().__init__(f"Failed to install {shown}: {cause}")


class JavaPackage:
    """A named, installable set of files plus its metadata document.

    Files are kept in insertion order.  The metadata file lives at
    *metadata_path* and is always installed and described last.
    """

    def __init__(self, package_id: str, metadata_path: str | PurePath) -> None:
        self._id = package_id
        self._metadata_path = normalize_path(metadata_path)
        self._files: dict[PurePosixPath, FileEntry] = {}
        self._metadata = PackageMetadata()

    @property
    def id(self) -> str:
        return self._id

    @property
    def metadata_path(self) -> PurePosixPath:
        return self._metadata_path

    @property
    def metadata(self) -> PackageMetadata:
        return self._metadata

    @property
    def files(self) -> tuple[FileEntry, ...]:
        return tuple(self._files.values())

    def add_file(self, entry: FileEntry) -> None:
        if entry.path in self._files or entry.path == self._metadata_path:
            raise DuplicatePathError(self._id, entry.path)
        self._files[entry.path] = entry

    # -- installation --------------------------------------------------------

    def install(self, root: Path | str) -> None:
        """Write all members and the metadata file below *root*.

        Existing directories are reused and existing files replaced, so
        installing twice into the same root gives the same tree.  A failure
        raises :class:`InstallError` naming the offending path; files written
        before it are left in place.
        """
        root = Path(root)
        logger.debug("Installing package '%s' into %s", self._id, root)
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InstallError(root, exc) from exc

        for entry in self._files.values():
            try:
                materialize(entry, root)
            except OSError as exc:
                raise InstallError(entry.path, exc) from exc

        try:
            ensure_directories(root, self._metadata_path.parent)
            target = root.joinpath(*self._metadata_path.parts)
            write_metadata(self._metadata, target)
            target.chmod(DEFAULT_FILE_MODE)
        except OSError as exc:
            raise InstallError(self._metadata_path, exc) from exc

    # -- descriptor ----------------------------------------------------------

    def build_descriptor(self) -> list[str]:
        """Return one ``%attr`` line per member, then one for the metadata file."""
        lines = [describe(entry) for entry in self._files.values()]
        lines.append(descriptor_line(self._metadata_path))
        return lines

    def write_descriptor(self, path: Path | str) -> None:
        with Path(path).open("w", encoding="utf-8") as handle:
            for line in self.build_descriptor():
                handle.write(line + "\n")
