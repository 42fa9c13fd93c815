"""Archive inspection: manifests, embedded pom.properties and identity resolution."""

from artinstall.archive.resolver import STRATEGIES, resolve_archive_identity

__all__ = ["STRATEGIES", "resolve_archive_identity"]
