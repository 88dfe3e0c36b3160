[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pkmanager"
version = "0.1.0"
description = "A small package manager core: version comparison, dependency resolution and a SQLite package store"
requires-python = ">=3.10"
dependencies = []
keywords = ["package-manager", "dependencies", "versions", "resolver", "sqlite"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pkm = "pkmanager.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pkmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
