"""Shared test fixtures for artinstall."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

JarFactory = Callable[..., Path]


def write_jar(
    path: Path,
    entries: dict[str, str | bytes] | None = None,
    manifest: dict[str, str] | None = None,
) -> Path:
    """Write a JAR with an optional manifest main section and extra entries.

    Entries are stored in the given order, after the manifest.
    """
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        if manifest is not None:
            lines = ["Manifest-Version: 1.0"] + [f"{k}: {v}" for k, v in manifest.items()]
            archive.writestr("META-INF/MANIFEST.MF", "\r\n".join(lines) + "\r\n\r\n")
        for name, content in (entries or {}).items():
            archive.writestr(name, content)
    return path


def directory_structure(root: Path) -> list[str]:
    """List everything below *root* as ``D /dir``, ``F /file`` or ``L /link``."""
    result = []
    for path in sorted(root.rglob("*")):
        rel = "/" + path.relative_to(root).as_posix()
        if path.is_symlink():
            result.append(f"L {rel}")
        elif path.is_dir():
            result.append(f"D {rel}")
        else:
            result.append(f"F {rel}")
    return result


@pytest.fixture
def jar_factory(tmp_path: Path) -> JarFactory:
    """Build JARs inside the test's temporary directory."""

    def make(name: str, entries: dict[str, str | bytes] | None = None, manifest: dict[str, str] | None = None) -> Path:
        return write_jar(tmp_path / name, entries, manifest)

    return make


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    root = tmp_path / "buildroot"
    root.mkdir()
    return root


POM_PROPERTIES = """\
#Generated by Maven
#Mon Jan 01 00:00:00 UTC 2024
groupId=org.example
artifactId=foo
version=1.2
"""
