"""Dependency resolution over a set of available and installed packages."""

from __future__ import annotations

from dataclasses import dataclass, field

from pkmanager.packages import Package, PackageError, PackageErrorType, PackageStatus
from pkmanager.versions import version_satisfies

__all__ = ["Resolution", "PackageManager"]


@dataclass
class Resolution:
    """Outcome of a dependency check.

    ``to_install`` lists packages in the order they were accepted, so a
    dependency always comes before the package that needs it. ``errors``
    lists failures in the order they were found, innermost first.
    """

    resolved: bool
    to_install: list[Package] = field(default_factory=list)
    errors: list[PackageError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.resolved


class PackageManager:
    """Keeps the installable and the locally installed packages, and resolves requirements."""

    def __init__(self) -> None:
        self._available: dict[str, Package] = {}
        self._installed: dict[str, Package] = {}

    def add_package(self, pkg: Package) -> None:
        """Make ``pkg`` installable; the first package added under a name is kept."""
        self._available.setdefault(pkg.name, pkg.copy())

    def add_local_installed_package(self, pkg: Package) -> None:
        """Record ``pkg`` as installed; the first package added under a name is kept."""
        self._installed.setdefault(pkg.name, pkg.copy())

    def check_dependencies(self, pkg: Package) -> Resolution:
        """Check whether every requirement of ``pkg`` can be met, recursively."""
        to_install: list[Package] = []
        errors: list[PackageError] = []
        resolved = self._resolve(pkg, to_install, errors)
        return Resolution(resolved, to_install, errors)

    def _resolve(
        self, pkg: Package, to_install: list[Package], errors: list[PackageError]
    ) -> bool:
        if pkg.status is PackageStatus.UNINSTALLED:
            candidate = pkg.copy()
            candidate.status = PackageStatus.TO_INSTALL
            return self._resolve(candidate, to_install, errors)

        resolved = self._check_requirements(pkg, to_install, errors)
        if resolved and pkg.status is PackageStatus.TO_INSTALL:
            to_install.append(pkg.copy())
        return resolved

    def _check_requirements(
        self, pkg: Package, to_install: list[Package], errors: list[PackageError]
    ) -> bool:
        resolved = True
        for dep in pkg.dependencies:
            installed = self._installed.get(dep.name)
            if installed is not None and version_satisfies(
                installed.version, dep.version, dep.compare_id
            ):
                continue

            candidate = self._available.get(dep.name)
            if candidate is None:
                errors.append(
                    PackageError(pkg.copy(), dep, None, PackageErrorType.DEPENDENCY_NOT_FOUND)
                )
                resolved = False
            elif not version_satisfies(candidate.version, dep.version, dep.compare_id):
                errors.append(
                    PackageError(
                        pkg.copy(), dep, candidate.copy(), PackageErrorType.DEPENDENCY_NOT_MATCH
                    )
                )
                resolved = False
            elif not self._resolve(candidate, to_install, errors):
                errors.append(
                    PackageError(
                        pkg.copy(),
                        dep,
                        candidate.copy(),
                        PackageErrorType.DEPENDENCY_NOT_INSTALLABLE,
                    )
                )
                resolved = False
        return resolved