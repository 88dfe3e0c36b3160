"""SQLite storage of package records."""

from __future__ import annotations

import os
import sqlite3

from pkmanager.packages import Package

__all__ = ["DatabaseError", "PackageDatabase"]

_SCHEMA = (
    """CREATE TABLE "packages" (
        "id" INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
        "name" TEXT NOT NULL COLLATE BINARY,
        "version" TEXT NOT NULL,
        "install_type" INTEGER NOT NULL
    )""",
    """CREATE TABLE dependencies (
        id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
        package_id INTEGER NOT NULL,
        dependency_id INTEGER NOT NULL,
        min_version VARCHAR(255),
        max_version VARCHAR(255),
        FOREIGN KEY (package_id) REFERENCES packages(id) ON DELETE CASCADE,
        FOREIGN KEY (dependency_id) REFERENCES packages(id) ON DELETE CASCADE
    )""",
)


class DatabaseError(Exception):
    """Raised when the package database cannot be read or written."""


class PackageDatabase:
    """A package database file, opened (and created if missing) on construction."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        try:
            self._connection = sqlite3.connect(self.path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def init_database(self) -> None:
        """Drop any existing tables and create empty ones."""
        connection = self._connection
        try:
            connection.execute('DROP TABLE IF EXISTS "main"."packages"')
            connection.execute('DROP TABLE IF EXISTS "main"."dependencies"')
            connection.execute("BEGIN")
            try:
                for statement in _SCHEMA:
                    connection.execute(statement)
            except sqlite3.Error:
                connection.execute("ROLLBACK")
                raise
            connection.execute("COMMIT")
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def get_package(self, name: str) -> Package | None:
        """Return the stored package called ``name``, or None if there is none."""
        try:
            row = self._connection.execute(
                "SELECT id, name, version, install_type FROM main.packages WHERE name = ?",
                (name,),
            ).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        if row is None:
            return None
        _, stored_name, version, _ = row
        return Package(stored_name, version)

    def close(self) -> None:
        """Close the database file."""
        self._connection.close()

    def __enter__(self) -> PackageDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()