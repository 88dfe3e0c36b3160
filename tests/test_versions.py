import pytest

from pkmanager.versions import (
    VersionCompareIdentifier as Cmp,
    VersionNumberPart,
    compare_pkg_version,
    split_version,
    version_satisfies,
)

ORDERED_PAIRS = [
    ("1.0.0", "1.0.1"),
    ("1.0.0", "1.1.0"),
    ("1.0.0", "2.0.0"),
    ("3", "3.14"),
    ("1.2.1", "a.1"),
    ("a.b.c", "a.b.d"),
    ("1.0.0-alpha", "1.0.0-beta"),
    ("1.0.0-alpha", "1.0.0-alpha.1"),
    ("1.0.0~1", "1.0.0"),
    ("1.0.0", "1.0.0+1"),
    ("1.0.0", "1.0.0-1"),
    ("1.0.0~1", "1.0.0-1"),
    ("3-1", "3+1"),
    ("9", "10"),
    ("2.0.0~test", "2.0.0"),
]


@pytest.mark.parametrize("version", ["1.0.0", "1.0.0-alpha", "", "a.b.c", "2.0~x"])
def test_identical_strings_are_equal(version):
    assert compare_pkg_version(version, version) is Cmp.EQUAL


@pytest.mark.parametrize("smaller, larger", ORDERED_PAIRS)
def test_ordered_pairs_forward(smaller, larger):
    assert compare_pkg_version(smaller, larger) is Cmp.SMALLER


@pytest.mark.parametrize("smaller, larger", ORDERED_PAIRS)
def test_ordered_pairs_reverse(smaller, larger):
    assert compare_pkg_version(larger, smaller) is Cmp.GREATER


def test_tilde_plain_plus_chain():
    chain = ["1.0.0~1", "1.0.0", "1.0.0+1"]
    for lower, upper in zip(chain, chain[1:]):
        assert compare_pkg_version(lower, upper) is Cmp.SMALLER
        assert compare_pkg_version(upper, lower) is Cmp.GREATER
    assert compare_pkg_version(chain[0], chain[-1]) is Cmp.SMALLER


def test_numerically_equal_parts_are_unknown():
    assert compare_pkg_version("1.01", "1.1") is Cmp.UNKNOWN


@pytest.mark.parametrize(
    "version", ["1.0.0-1", "2.0.0~test", "", "abc", "10.20+3", "1..2"]
)
def test_split_version_round_trips(version):
    assert "".join(part.value for part in split_version(version)) == version


def test_split_version_parts():
    values = [part.value for part in split_version("1.0.0-1")]
    assert values == ["1", ".", "0", ".", "0", "-", "1"]


def test_split_version_trailing_character_adds_empty_part():
    assert split_version("1.0~")[-1].value == ""


def test_split_empty_version():
    assert [part.value for part in split_version("")] == [""]


def test_numbers_compare_numerically():
    assert VersionNumberPart("10") > VersionNumberPart("9")
    assert VersionNumberPart("9") < VersionNumberPart("10")


def test_numbers_are_smaller_than_characters():
    assert VersionNumberPart("9") < VersionNumberPart("a")
    assert VersionNumberPart("a") > VersionNumberPart("9")


def test_tilde_is_smaller_than_letters():
    assert VersionNumberPart("~") < VersionNumberPart("a")
    assert VersionNumberPart("a") > VersionNumberPart("~")


def test_part_equality_is_textual():
    assert VersionNumberPart("1") == VersionNumberPart("1")
    assert not VersionNumberPart("01") == VersionNumberPart("1")
    assert not VersionNumberPart("01") < VersionNumberPart("1")
    assert not VersionNumberPart("01") > VersionNumberPart("1")


def test_parts_hash_by_value():
    assert len({VersionNumberPart("1"), VersionNumberPart("1"), VersionNumberPart("x")}) == 2


@pytest.mark.parametrize(
    "available, wanted, relation, expected",
    [
        ("2.0.0", "2.0.0~test", Cmp.GREATER_OR_EQUAL, True),
        ("1.5.0", "2.0.0", Cmp.SMALLER, True),
        ("2.0.0", "3.0.0", Cmp.EQUAL, False),
        ("3.0.0", "3.0.0", Cmp.EQUAL, True),
        ("3.0.0", "3.0.0", Cmp.SMALLER_OR_EQUAL, True),
        ("3.0.0", "3.0.0", Cmp.GREATER_OR_EQUAL, True),
        ("1.0.0", "2.0.0", Cmp.GREATER_OR_EQUAL, False),
        ("2.0.0", "1.0.0", Cmp.SMALLER_OR_EQUAL, False),
        ("1.01", "1.1", Cmp.GREATER_OR_EQUAL, False),
        ("1.01", "1.1", Cmp.UNKNOWN, True),
    ],
)
def test_version_satisfies(available, wanted, relation, expected):
    assert version_satisfies(available, wanted, relation) is expected