"""Command line entry point."""

from __future__ import annotations

import argparse
import sys

from pkmanager.database import DatabaseError, PackageDatabase
from pkmanager.manager import PackageManager, Resolution
from pkmanager.packages import Dependency, Package, PackageError, PackageErrorType, PackageStatus
from pkmanager.versions import VersionCompareIdentifier as V

__all__ = ["format_resolution", "main"]


def _describe_error(error: PackageError) -> str | None:
    wanted = error.wanted_dependency
    prefix = (
        f"  {error.current_package.name} {error.current_package.version} "
        f"depends on {wanted.name} {wanted.version} "
    )
    if error.error_type is PackageErrorType.DEPENDENCY_NOT_FOUND:
        return prefix + "that is not found."
    if error.error_type is PackageErrorType.DEPENDENCY_NOT_MATCH:
        found = error.current_dependency
        name, version = (found.name, found.version) if found else ("", "")
        return prefix + f"but only {name} {version} is installable."
    if error.error_type is PackageErrorType.DEPENDENCY_NOT_INSTALLABLE:
        return prefix + "that is not installable."
    return None


def format_resolution(resolution: Resolution) -> str:
    """Render a resolution as report text, outermost package or error first."""
    if resolution.resolved:
        lines = ["Successfully resolved deps.", "Need to install following package(s):"]
        lines += [f"  {p.name} {p.version}" for p in reversed(resolution.to_install)]
    else:
        lines = ["Unable to resolve deps"]
        described = (_describe_error(e) for e in reversed(resolution.errors))
        lines += [line for line in described if line is not None]
    return "\n".join(lines)


def _demo() -> tuple[PackageManager, Package]:
    manager = PackageManager()
    manager.add_package(Package("SubDep1", "2.0.0"))
    manager.add_package(Package("SubDep2", "1.5.0"))
    manager.add_local_installed_package(Package("SubDep3", "2.0.0"))
    manager.add_package(
        Package(
            "Dep1",
            "1.0.0-1",
            [
                Dependency("SubDep1", V.GREATER_OR_EQUAL, "2.0.0~test"),
                Dependency("SubDep2", V.SMALLER, "2.0.0"),
            ],
        )
    )
    manager.add_package(Package("Dep2", "1.0.0", [Dependency("SubDep3", V.EQUAL, "3.0.0")]))
    app = Package(
        "MainApp",
        "1.0",
        [
            Dependency("Dep1", V.GREATER_OR_EQUAL, "1.0.0"),
            Dependency("Dep2", V.EQUAL, "1.0.0"),
        ],
        PackageStatus.TO_INSTALL,
    )
    return manager, app


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pkmanager", description="Package manager.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("demo", help="resolve the built-in sample package set")
    init = commands.add_parser("init", help="create empty package tables")
    init.add_argument("--database", required=True, help="database file")
    query = commands.add_parser("query", help="look up a stored package")
    query.add_argument("name", help="package name")
    query.add_argument("--database", required=True, help="database file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command in (None, "demo"):
        manager, app = _demo()
        print(format_resolution(manager.check_dependencies(app)))
        return 0

    try:
        with PackageDatabase(args.database) as db:
            if args.command == "init":
                db.init_database()
                return 0
            package = db.get_package(args.name)
    except DatabaseError as exc:
        print(f"Database exception: {exc}", file=sys.stderr)
        return 1

    if package is None:
        print(f"{args.name}: not found", file=sys.stderr)
        return 1
    print(f"{package.name} {package.version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())