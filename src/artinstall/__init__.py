"""artinstall — resolve Java artifact identities and assemble installable packages."""

__version__ = "0.3.0"
