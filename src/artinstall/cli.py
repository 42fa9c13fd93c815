"""Command-line entry point: ``artinstall identify`` and ``artinstall install``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from artinstall import __version__
from artinstall.archive.resolver import resolve_archive_identity
from artinstall.install.package import DuplicatePathError, InstallError
from artinstall.installer import Installer
from artinstall.plan import PlanError, PlanLoader
from artinstall.settings import Settings

logger = logging.getLogger("artinstall.cli")


def _identify(args: argparse.Namespace, settings: Settings) -> int:
    extension = args.extension or settings.default_extension
    status = 0
    for archive in args.archives:
        artifact = resolve_archive_identity(Path(archive), extension)
        if artifact is None:
            print(f"{archive}: unresolved", file=sys.stderr)
            status = 1
            continue
        print(f"{archive}: {artifact}")
    return status


def _install(args: argparse.Namespace, settings: Settings) -> int:
    try:
        plan = PlanLoader().load(Path(args.plan))
    except (OSError, PlanError) as exc:
        logger.error("Cannot read installation plan %s: %s", args.plan, exc)
        return 2

    descriptor_dir = Path(args.descriptors) if args.descriptors else None
    try:
        packages = Installer(settings).install(plan, Path(args.root), descriptor_dir)
    except (DuplicatePathError, InstallError, PlanError) as exc:
        logger.error("Installation failed: %s", exc)
        return 1

    if descriptor_dir is None:
        for package in packages:
            print("\n".join(package.build_descriptor()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="artinstall")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    identify = sub.add_parser("identify", help="print the artifact identity of archives")
    identify.add_argument("archives", nargs="+")
    identify.add_argument("--extension", help="extension for identities read from pom.properties")

    install = sub.add_parser("install", help="install packages described by a plan")
    install.add_argument("plan")
    install.add_argument("root")
    install.add_argument("--descriptors", help="directory to write .mfiles descriptors into")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if args.command == "identify":
        return _identify(args, settings)
    return _install(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
