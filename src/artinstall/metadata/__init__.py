"""Package metadata model and its XML form."""

from artinstall.metadata.model import ArtifactMetadata, PackageMetadata
from artinstall.metadata.serialization import read_metadata, to_element, write_metadata

__all__ = [
    "ArtifactMetadata",
    "PackageMetadata",
    "read_metadata",
    "to_element",
    "write_metadata",
]
