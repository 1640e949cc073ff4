"""Test the extarg.converters module."""

import pytest

from extarg import converters


@pytest.mark.parametrize("value,expected", (("true", True), ("false", False)))
def test_to_bool(value, expected):
    """Test to_bool happy paths."""
    assert converters.to_bool(value) is expected


@pytest.mark.parametrize("value", ("True", "FALSE", "yes", "1", "", " true"))
def test_to_bool_invalid(value):
    """Test to_bool rejects anything but the exact literals."""
    with pytest.raises(ValueError):
        converters.to_bool(value)


@pytest.mark.parametrize(
    "value,expected", (("0", 0), ("420", 420), ("-7", -7), ("+7", 7), ("007", 7))
)
def test_to_int(value, expected):
    """Test to_int happy paths."""
    assert converters.to_int(value) == expected


@pytest.mark.parametrize(
    "value", ("4.2", "e", "", " ", " 1", "0x10", "1_000", "٣", "--1")
)
def test_to_int_invalid(value):
    """Test to_int only accepts base-10 ASCII digits."""
    with pytest.raises(ValueError):
        converters.to_int(value)


@pytest.mark.parametrize(
    "value,expected", (("12.34", 12.34), ("-1", -1.0), ("1e3", 1000.0), (".5", 0.5))
)
def test_to_float(value, expected):
    """Test to_float happy paths."""
    assert converters.to_float(value) == expected


@pytest.mark.parametrize(
    "value", ("abc", "", " 1.5", "1.5 ", "1,5", "1_000", "٣.٥", "٣")
)
def test_to_float_invalid(value):
    """Test to_float rejects malformed literals."""
    with pytest.raises(ValueError):
        converters.to_float(value)
