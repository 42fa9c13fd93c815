"""Pydantic domain models for artinstall."""

from artinstall.models.artifact import (
    DEFAULT_EXTENSION,
    DEFAULT_VERSION,
    DUMMY,
    DUMMY_JPP,
    UNKNOWN_NAMESPACE,
    UNKNOWN_VERSION,
    Artifact,
    collection_to_string,
    is_void,
)

__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_VERSION",
    "DUMMY",
    "DUMMY_JPP",
    "UNKNOWN_NAMESPACE",
    "UNKNOWN_VERSION",
    "Artifact",
    "collection_to_string",
    "is_void",
]
