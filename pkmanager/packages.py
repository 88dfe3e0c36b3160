"""Package, dependency and resolution error records."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field

from pkmanager.versions import VersionCompareIdentifier

__all__ = [
    "PackageStatus",
    "PackageInstallType",
    "Dependency",
    "Package",
    "PackageErrorType",
    "PackageError",
]


class PackageStatus(enum.Enum):
    """Install state of a package."""

    UNINSTALLED = 0
    INSTALLED = 1
    TO_INSTALL = 2


class PackageInstallType(enum.Enum):
    """AUTO means the package was pulled in as a dependency."""

    AUTO = 0
    MANUAL = 1


@dataclass(frozen=True)
class Dependency:
    """A requirement on another package's version."""

    name: str
    compare_id: VersionCompareIdentifier
    version: str


@dataclass
class Package:
    """A package with its version, requirements and install state."""

    name: str
    version: str
    dependencies: list[Dependency] = field(default_factory=list)
    status: PackageStatus = PackageStatus.UNINSTALLED

    def copy(self) -> Package:
        """Return a copy that shares no mutable state with this package."""
        return dataclasses.replace(self, dependencies=list(self.dependencies))


class PackageErrorType(enum.Enum):
    """Reason a dependency could not be resolved."""

    UNKNOWN = 0
    VERSION_NOT_MATCH = 1
    DEPENDENCY_NOT_MATCH = 2
    DEPENDENCY_NOT_FOUND = 3
    DEPENDENCY_CIRCULAR_REFERENCE = 4
    DEPENDENCY_NOT_INSTALLED = 5
    DEPENDENCY_NOT_INSTALLABLE = 6
    DEPENDENCY_NOT_UNINSTALLABLE = 7
    DEPENDENCY_NOT_UPDATABLE = 8


@dataclass
class PackageError:
    """A failed requirement: who wanted what, and what was available instead.

    ``current_dependency`` is None when no candidate package was found.
    """

    current_package: Package
    wanted_dependency: Dependency
    current_dependency: Package | None
    error_type: PackageErrorType