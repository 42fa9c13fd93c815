"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the artinstall installer.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"

    # Layout, relative to the installation root
    java_dir: str = "usr/share/java"
    metadata_dir: str = "usr/share/maven-metadata"

    # Extension assumed for archives whose identity comes from pom.properties
    default_extension: str = "jar"

    # Descriptor files are named <prefix> or <prefix>-<package id>
    descriptor_prefix: str = ".mfiles"

    def descriptor_name(self, package_id: str) -> str:
        """Return the descriptor file name for a package."""
        return f"{self.descriptor_prefix}-{package_id}" if package_id else self.descriptor_prefix
