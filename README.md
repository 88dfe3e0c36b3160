# pkmanager

The core of a small package manager, with no dependencies outside the
standard library. It does three jobs:

- **Comparing version strings**, where `~` sorts before anything and `+`
  sorts after the plain release.
- **Resolving dependencies** against a set of installable packages and a set
  of packages that are already installed locally.
- **Reading package records** from an SQLite database.

## Comparing versions

```python
from pkmanager.versions import (
    VersionCompareIdentifier,
    compare_pkg_version,
    version_satisfies,
)

compare_pkg_version("1.0.0", "1.0.1")    # VersionCompareIdentifier.SMALLER
compare_pkg_version("1.0.0~1", "1.0.0")  # VersionCompareIdentifier.SMALLER
compare_pkg_version("1.0.0+1", "1.0.0")  # VersionCompareIdentifier.GREATER

# Is version 2.0.0 acceptable for a requirement ">= 2.0.0~test"?
version_satisfies("2.0.0", "2.0.0~test", VersionCompareIdentifier.GREATER_OR_EQUAL)  # True
```

`split_version` breaks a version string into `VersionNumberPart` pieces: runs
of digits and single other characters. Digit runs compare as numbers, and
numbers sort before any character. Among characters, `~` sorts lowest, then
ordinary characters (by character code), then `+`, and `.` highest.

When one string runs out first, the longer one is the greater, unless what it
adds begins with `~`. `compare_pkg_version` returns `EQUAL` only for identical
strings and `UNKNOWN` when the strings differ but no part decides the order.

`version_satisfies(available, wanted, compare_id)` accepts `EQUAL`, `SMALLER`,
`GREATER`, `GREATER_OR_EQUAL` and `SMALLER_OR_EQUAL` as the required relation.

## Resolving dependencies

```python
from pkmanager.cli import format_resolution
from pkmanager.manager import PackageManager
from pkmanager.packages import Dependency, Package, PackageStatus
from pkmanager.versions import VersionCompareIdentifier

manager = PackageManager()
manager.add_package(Package("SubDep1", "2.0.0"))
manager.add_package(
    Package(
        "Dep1",
        "1.0.0",
        [Dependency("SubDep1", VersionCompareIdentifier.GREATER_OR_EQUAL, "2.0.0")],
    )
)
manager.add_local_installed_package(Package("SubDep3", "2.0.0"))

app = Package(
    "MainApp",
    "1.0",
    [Dependency("Dep1", VersionCompareIdentifier.GREATER_OR_EQUAL, "1.0.0")],
    PackageStatus.TO_INSTALL,
)

resolution = manager.check_dependencies(app)
if resolution:
    print([p.name for p in resolution.to_install])  # ['SubDep1', 'Dep1', 'MainApp']
print(format_resolution(resolution))
```

For each dependency the resolver first looks at the locally installed
packages; an installed package whose version meets the requirement needs
nothing more. Otherwise it takes the installable package of that name and, if
its version fits, checks that package's own dependencies recursively. Only the
first package added under a name is kept, in either set.

`check_dependencies` returns a `Resolution` that is true when everything was
resolved. `to_install` lists the packages to install with each dependency
before the package that needs it; `errors` lists `PackageError` records,
innermost first, each with a `PackageErrorType`: `DEPENDENCY_NOT_FOUND`
(nothing installable under that name), `DEPENDENCY_NOT_MATCH` (the installable
version does not fit) or `DEPENDENCY_NOT_INSTALLABLE` (its own dependencies
failed).

`format_resolution` renders a resolution as text, outermost package or error
first.

## The package database

```python
from pkmanager.database import DatabaseError, PackageDatabase

with PackageDatabase("packages.db") as db:
    db.init_database()            # drops and recreates the packages and dependencies tables
    found = db.get_package("test")  # a Package, or None
```

The file is created if it does not exist. Failures are raised as
`DatabaseError`.

## Command line

```
pkm demo
pkm init --database packages.db
pkm query NAME --database packages.db
```

- `demo` (also the default with no command) resolves a built-in sample set
  of packages and prints the report. Its sample is deliberately unresolvable:

  ```
  Unable to resolve deps
    MainApp 1.0 depends on Dep2 1.0.0 that is not installable.
    Dep2 1.0.0 depends on SubDep3 3.0.0 that is not found.
  ```

- `init` creates empty package tables in the given database file.
- `query` prints the name and version of a stored package; it exits with
  status 1 if the package is not found or the database cannot be read.

## What it does not do

- It does not download, unpack, install or remove anything; resolution only
  reports what would need installing.
- The database can be created and read, but there is no function to add
  package records to it, and `get_package` returns only a package's name and
  version: stored dependencies and install type are not read back.
- There is no detection of circular dependencies.