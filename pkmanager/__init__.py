"""Package manager core: version comparison, dependency resolution and an SQLite package store."""

__version__ = "0.1.0"
__all__ = ["cli", "database", "manager", "packages", "versions"]