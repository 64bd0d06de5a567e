"""
Tests for CAS registry number hyphenation.
"""

import pytest

from amdis.msl.extractor import hyphenate_cas_number


class TestHyphenation:
    """Valid CAS numbers."""

    def test_known_example(self):
        """Test the documented example."""
        assert hyphenate_cas_number(1118689) == "1118-68-9"

    @pytest.mark.parametrize("value,expected", [
        (50997, "50-99-7"),
        (108883, "108-88-3"),
        (7732185, "7732-18-5"),
        (12345678, "12345-67-8"),
        (123456789, "123456-78-9"),
    ])
    def test_segments_aligned_from_right(self, value, expected):
        """Test the last three digits form the fixed segments."""
        assert hyphenate_cas_number(value) == expected

    @pytest.mark.parametrize("digits", range(5, 10))
    def test_digits_preserved(self, digits):
        """Test every valid length keeps the digits in order."""
        value = int("123456789"[:digits])
        result = hyphenate_cas_number(value)

        assert result.count("-") == 2
        first, middle, check = result.split("-")
        assert 2 <= len(first) <= 6
        assert len(middle) == 2
        assert len(check) == 1
        assert first + middle + check == str(value)

    def test_string_input(self):
        """Test digit strings are accepted."""
        assert hyphenate_cas_number("50997") == "50-99-7"


class TestAbsent:
    """Inputs that give no CAS number."""

    @pytest.mark.parametrize("value", [0, -1, -1118689])
    def test_non_positive(self, value):
        """Test zero and negative numbers."""
        assert hyphenate_cas_number(value) is None

    @pytest.mark.parametrize("value", ["0", "000000"])
    def test_all_zero_strings(self, value):
        """Test zero runs as captured from CASNO: fields."""
        assert hyphenate_cas_number(value) is None

    @pytest.mark.parametrize("value", [1, 12, 123, 1234])
    def test_too_few_digits(self, value):
        """Test numbers shorter than five digits."""
        # 2 + 2 + 1 is the shortest valid layout
        assert hyphenate_cas_number(value) is None

    @pytest.mark.parametrize("value", [1234567890, 99999999999])
    def test_too_many_digits(self, value):
        """Test numbers longer than nine digits."""
        assert hyphenate_cas_number(value) is None

    @pytest.mark.parametrize("value", [None, "", "abc", "50-99-7"])
    def test_not_an_integer(self, value):
        """Test values int() rejects."""
        assert hyphenate_cas_number(value) is None
