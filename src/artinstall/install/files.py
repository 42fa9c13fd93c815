"""Package member files: regular files, directories and symbolic links.

Every entry carries a path relative to the installation root, written with
forward slashes, plus the permission bits and ownership it is installed with.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path, PurePath, PurePosixPath

DEFAULT_FILE_MODE = 0o644
DEFAULT_DIR_MODE = 0o755
DEFAULT_LINK_MODE = 0o777
DEFAULT_OWNER = "root"
DEFAULT_GROUP = "root"

# Characters that force a descriptor path to be double-quoted.
_QUOTE_TRIGGERS = frozenset(" \t\v")


class FileKind(StrEnum):
    FILE = "file"
    DIRECTORY = "dir"
    SYMLINK = "symlink"


def normalize_path(path: str | PurePath) -> PurePosixPath:
    """Return *path* as a relative POSIX path, rejecting anything outside the root."""
    text = path.as_posix() if isinstance(path, PurePath) else str(path)
    posix = PurePosixPath(text)
    if posix.is_absolute():
        raise ValueError(f"Path must be relative to the installation root: {text}")
    if not posix.parts or ".." in posix.parts:
        raise ValueError(f"Invalid path for a package member: {text!r}")
    return posix


@dataclass(frozen=True)
class RegularFile:
    """A regular file with byte content."""

    path: PurePosixPath
    content: bytes = b""
    mode: int = DEFAULT_FILE_MODE
    owner: str = DEFAULT_OWNER
    group: str = DEFAULT_GROUP
    kind: FileKind = field(default=FileKind.FILE, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))


@dataclass(frozen=True)
class Directory:
    """A directory owned by the package."""

    path: PurePosixPath
    mode: int = DEFAULT_DIR_MODE
    owner: str = DEFAULT_OWNER
    group: str = DEFAULT_GROUP
    kind: FileKind = field(default=FileKind.DIRECTORY, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))


@dataclass(frozen=True)
class SymbolicLink:
    """A symbolic link pointing at *target* (absolute or relative to the link)."""

    path: PurePosixPath
    target: str
    mode: int = DEFAULT_LINK_MODE
    owner: str = DEFAULT_OWNER
    group: str = DEFAULT_GROUP
    kind: FileKind = field(default=FileKind.SYMLINK, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))


FileEntry = RegularFile | Directory | SymbolicLink


# ---------------------------------------------------------------------------
# Installation
# ---------------------------------------------------------------------------


def ensure_directories(root: Path, relative: PurePosixPath) -> None:
    """Create *relative* and all its parents under *root*.

    Missing directories get mode 0755; existing ones are left untouched.
    """
    current = root
    for part in relative.parts:
        current = current / part
        if not current.is_dir():
            current.mkdir()
            current.chmod(DEFAULT_DIR_MODE)


def _remove_existing(target: Path) -> None:
    if target.is_symlink() or target.is_file():
        target.unlink()


def materialize(entry: FileEntry, root: Path) -> Path:
    """Write a single entry below *root* and return its on-disk location."""
    target = root.joinpath(*entry.path.parts)
    ensure_directories(root, entry.path.parent)

    match entry:
        case Directory(mode=mode):
            if not target.is_dir():
                target.mkdir()
            target.chmod(mode)
        case RegularFile(content=content, mode=mode):
            _remove_existing(target)
            target.write_bytes(content)
            target.chmod(mode)
        case SymbolicLink(target=link_target):
            _remove_existing(target)
            os.symlink(link_target, target)
        case _:
            raise TypeError(f"Unsupported file entry: {entry!r}")
    return target


# ---------------------------------------------------------------------------
# Descriptor rendering
# ---------------------------------------------------------------------------


def quote_path(path: str) -> str:
    """Double-quote *path* if it contains a space, tab or vertical tab."""
    if _QUOTE_TRIGGERS.intersection(path):
        return f'"{path}"'
    return path


def descriptor_line(
    path: PurePosixPath,
    mode: int = DEFAULT_FILE_MODE,
    owner: str = DEFAULT_OWNER,
    group: str = DEFAULT_GROUP,
    *,
    directory: bool = False,
) -> str:
    """Render one ``%attr(mode,owner,group) /path`` descriptor line."""
    line = f"%attr({mode:04o},{owner},{group}) {quote_path('/' + path.as_posix())}"
    return f"%dir {line}" if directory else line


def describe(entry: FileEntry) -> str:
    """Return the descriptor line for a package member."""
    match entry:
        case Directory():
            return descriptor_line(entry.path, entry.mode, entry.owner, entry.group, directory=True)
        case RegularFile() | SymbolicLink():
            return descriptor_line(entry.path, entry.mode, entry.owner, entry.group)
        case _:
            raise TypeError(f"Unsupported file entry: {entry!r}")
