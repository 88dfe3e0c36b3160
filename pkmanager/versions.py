"""Comparison of package version strings."""

from __future__ import annotations

import enum
import string

__all__ = [
    "VersionCompareIdentifier",
    "VersionNumberPart",
    "split_version",
    "compare_pkg_version",
    "version_satisfies",
]

_DIGITS = frozenset(string.digits)


class VersionCompareIdentifier(enum.Enum):
    """Outcome of a version comparison, or the relation a dependency requires."""

    EQUAL = 0
    SMALLER = 1
    GREATER = 2
    UNKNOWN = 3
    GREATER_OR_EQUAL = 4
    SMALLER_OR_EQUAL = 5


def _is_number(text: str) -> bool:
    return bool(text) and all(char in _DIGITS for char in text)


class VersionNumberPart:
    """One piece of a split version string: a run of digits or a single character.

    Numbers compare numerically and are always smaller than characters.
    Among characters, ``~`` sorts below everything, ``+`` above ordinary
    characters and ``.`` highest, since it means the version goes on.
    """

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"VersionNumberPart({self.value!r})"

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionNumberPart):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: VersionNumberPart) -> bool:
        if not isinstance(other, VersionNumberPart):
            return NotImplemented
        mine, theirs = self.value, other.value
        mine_number, theirs_number = _is_number(mine), _is_number(theirs)
        if mine_number and theirs_number:
            return int(mine) < int(theirs)
        if mine_number:
            return True
        if theirs_number:
            return False

        if mine == "." and theirs != ".":
            return False
        if mine == "~" and theirs != "~":
            return True
        if mine == "+" and theirs != "+":
            return False

        if theirs == "." and mine != ".":
            return True
        if theirs == "~" and mine != "~":
            return False
        if theirs == "+" and mine != "+":
            return True

        return mine < theirs

    def __gt__(self, other: VersionNumberPart) -> bool:
        if not isinstance(other, VersionNumberPart):
            return NotImplemented
        mine, theirs = self.value, other.value
        mine_number, theirs_number = _is_number(mine), _is_number(theirs)
        if mine_number and theirs_number:
            return int(mine) > int(theirs)
        if mine_number:
            return False
        if theirs_number:
            return True

        if mine == "." and theirs != ".":
            return True
        if mine == "~" and theirs != "~":
            return False
        if mine == "+" and theirs != "+":
            return True

        if theirs == "." and mine != ".":
            return False
        if theirs == "~" and mine != "~":
            return True
        if theirs == "+" and mine != "+":
            return False

        return mine > theirs


def split_version(version: str) -> list[VersionNumberPart]:
    """Split a version string into digit runs and single non-digit characters.

    The trailing run is always appended, so a string ending in a non-digit
    yields a final empty part.
    """
    parts: list[VersionNumberPart] = []
    digits = ""
    for char in version:
        if char in _DIGITS:
            digits += char
            continue
        if digits:
            parts.append(VersionNumberPart(digits))
        digits = ""
        parts.append(VersionNumberPart(char))
    parts.append(VersionNumberPart(digits))
    return parts


def compare_pkg_version(pkg1: str, pkg2: str) -> VersionCompareIdentifier:
    """Tell how the version ``pkg1`` relates to ``pkg2``.

    The result reads as "pkg1 is <result> than pkg2". ``UNKNOWN`` is
    returned when the strings differ but no part decides the order.
    """
    if pkg1 == pkg2:
        return VersionCompareIdentifier.EQUAL

    parts1 = split_version(pkg1)
    parts2 = split_version(pkg2)
    tilde = VersionNumberPart("~")

    for index in range(max(len(parts1), len(parts2))):
        if index >= len(parts1):
            # The longer one is newer unless what it adds starts with '~'.
            if parts2[index] == tilde:
                return VersionCompareIdentifier.GREATER
            return VersionCompareIdentifier.SMALLER
        if index >= len(parts2):
            if parts1[index] == tilde:
                return VersionCompareIdentifier.SMALLER
            return VersionCompareIdentifier.GREATER

        if parts1[index] < parts2[index]:
            return VersionCompareIdentifier.SMALLER
        if parts1[index] > parts2[index]:
            return VersionCompareIdentifier.GREATER

    return VersionCompareIdentifier.UNKNOWN


def version_satisfies(
    available: str, wanted: str, compare_id: VersionCompareIdentifier
) -> bool:
    """Tell whether version ``available`` stands in relation ``compare_id`` to ``wanted``."""
    result = compare_pkg_version(available, wanted)
    if compare_id is VersionCompareIdentifier.GREATER_OR_EQUAL:
        return result in (VersionCompareIdentifier.GREATER, VersionCompareIdentifier.EQUAL)
    if compare_id is VersionCompareIdentifier.SMALLER_OR_EQUAL:
        return result in (VersionCompareIdentifier.SMALLER, VersionCompareIdentifier.EQUAL)
    return result is compare_id