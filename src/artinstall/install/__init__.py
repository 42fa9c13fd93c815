"""Package assembly: member files, installation and descriptors."""

from artinstall.install.files import Directory, FileEntry, RegularFile, SymbolicLink
from artinstall.install.package import DuplicatePathError, InstallError, JavaPackage

__all__ = [
    "Directory",
    "DuplicatePathError",
    "FileEntry",
    "InstallError",
    "JavaPackage",
    "RegularFile",
    "SymbolicLink",
]
