"""Unit tests for alphabet, weight and policy tables."""

import re

import pytest

from uscc.constants import (
    DEPARTMENT_SUBCODES,
    GB11714_ALPHABET,
    GB11714_CHAR_VALUES,
    GB11714_WEIGHTS,
    GB32100_ALPHABET,
    GB32100_CHAR_VALUES,
    GB32100_VALUE_CHARS,
    GB32100_WEIGHTS,
    REGION_PREFIXES,
    REGION_PREFIXES_BY_ZONE,
    USCC_PATTERN,
)
from uscc.types import RegistrationDepartment


class TestGB32100Alphabet:
    """Test Table A and its reverse."""

    def test_size(self):
        assert len(GB32100_ALPHABET) == 31
        assert len(GB32100_CHAR_VALUES) == 31
        assert len(GB32100_VALUE_CHARS) == 31

    def test_bijective(self):
        for char, value in GB32100_CHAR_VALUES.items():
            assert GB32100_VALUE_CHARS[value] == char
        assert sorted(GB32100_VALUE_CHARS) == list(range(31))

    def test_excluded_letters(self):
        for char in "IOSVZ":
            assert char not in GB32100_CHAR_VALUES

    def test_selected_values(self):
        assert GB32100_CHAR_VALUES["A"] == 10
        assert GB32100_CHAR_VALUES["H"] == 17
        assert GB32100_CHAR_VALUES["J"] == 18
        assert GB32100_CHAR_VALUES["P"] == 23
        assert GB32100_CHAR_VALUES["T"] == 26
        assert GB32100_CHAR_VALUES["Y"] == 30

    def test_pattern_matches_alphabet(self):
        """Test that the format pattern accepts exactly the Table A symbols."""
        pattern = re.compile(USCC_PATTERN)
        for code_point in range(32, 127):
            char = chr(code_point)
            assert bool(pattern.match(char * 18)) == (char in GB32100_CHAR_VALUES)

    def test_read_only(self):
        with pytest.raises(TypeError):
            GB32100_CHAR_VALUES["I"] = 18


class TestGB11714Alphabet:
    """Test Table B."""

    def test_size(self):
        assert len(GB11714_ALPHABET) == 36
        assert len(GB11714_CHAR_VALUES) == 36

    def test_values(self):
        assert GB11714_CHAR_VALUES["0"] == 0
        assert GB11714_CHAR_VALUES["9"] == 9
        assert GB11714_CHAR_VALUES["A"] == 10
        assert GB11714_CHAR_VALUES["I"] == 18
        assert GB11714_CHAR_VALUES["X"] == 33
        assert GB11714_CHAR_VALUES["Z"] == 35

    def test_covers_code_alphabet(self):
        for char in GB32100_ALPHABET:
            assert char in GB11714_CHAR_VALUES


class TestWeights:
    """Test weight vectors."""

    def test_composite_weights(self):
        assert len(GB32100_WEIGHTS) == 17
        assert list(GB32100_WEIGHTS) == [pow(3, i, 31) for i in range(17)]

    def test_org_weights(self):
        assert GB11714_WEIGHTS == (3, 7, 9, 10, 5, 8, 4, 2)


class TestDepartmentTable:
    """Test registration department policy table."""

    def test_covers_enum(self):
        assert set(DEPARTMENT_SUBCODES) == set(RegistrationDepartment)

    def test_subcodes(self):
        assert DEPARTMENT_SUBCODES[RegistrationDepartment.ESTABLISHMENT] == frozenset("1239")
        assert DEPARTMENT_SUBCODES[RegistrationDepartment.CIVIL_AFFAIRS] == frozenset("1239")
        assert DEPARTMENT_SUBCODES[RegistrationDepartment.INDUSTRY_AND_COMMERCE] == frozenset("123")
        assert DEPARTMENT_SUBCODES[RegistrationDepartment.OTHER] == frozenset("1")


class TestRegionPrefixes:
    """Test coarse region prefix whitelist."""

    def test_flattened_set(self):
        assert len(REGION_PREFIXES) == 34
        assert REGION_PREFIXES == {
            prefix for prefixes in REGION_PREFIXES_BY_ZONE.values() for prefix in prefixes
        }

    def test_no_duplicates_across_zones(self):
        total = sum(len(prefixes) for prefixes in REGION_PREFIXES_BY_ZONE.values())
        assert total == len(REGION_PREFIXES)

    def test_two_digit_prefixes(self):
        for prefix in REGION_PREFIXES:
            assert len(prefix) == 2 and prefix.isdigit()
