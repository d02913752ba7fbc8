#
# Axisfmt - Numeric Helper Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from axisfmt.exceptions import NonFiniteInput
from axisfmt.numeric import circular, fmt_decimal, magnitude, round_half_away, std_float, trimmed_digits


# Classes --------------------------------------------------------------------------------------------------------------

class FakeScalar:
    """Array scalar exposing .item() like NumPy or PyTorch."""

    def __init__(self, value):
        self._value = value

    def item(self):
        return self._value


class FakeQuantity:
    """Value with units like an Astropy Quantity."""

    def __init__(self, value, unit):
        self.value = value
        self.unit = unit


# Tests ----------------------------------------------------------------------------------------------------------------

class TestStdFloat:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(3, 3.0, id="int"),
            pytest.param(-1.25, -1.25, id="float"),
            pytest.param(Decimal("149.9823"), 149.9823, id="decimal"),
            pytest.param(Fraction(1, 4), 0.25, id="fraction"),
            pytest.param(FakeScalar(2.5), 2.5, id="item"),
            pytest.param(FakeQuantity(7, "m"), 7.0, id="quantity"),
        ],
    )
    def test_convert(self, value, expected):
        result = std_float(value)
        assert result == expected
        assert type(result) is float

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(None, id="none"),
            pytest.param(True, id="bool"),
            pytest.param("1.5", id="str"),
            pytest.param([1.5], id="list"),
            pytest.param(FakeScalar(False), id="item_bool"),
        ],
    )
    def test_type_error(self, value):
        with pytest.raises(TypeError):
            std_float(value)

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(float("nan"), id="nan"),
            pytest.param(float("-inf"), id="neg_inf"),
            pytest.param(Decimal("Infinity"), id="decimal_inf"),
            pytest.param(10 ** 400, id="huge_int"),
            pytest.param(Fraction(10 ** 400), id="huge_fraction"),
        ],
    )
    def test_non_finite(self, value):
        with pytest.raises(NonFiniteInput):
            std_float(value)


class TestCircular:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0.0, 0.0, id="zero"),
            pytest.param(359.5, 359.5, id="inside"),
            pytest.param(360.0, 0.0, id="period"),
            pytest.param(-0.5, 359.5, id="negative"),
            pytest.param(725.0, 5.0, id="two_turns"),
            pytest.param(-1e-20, 0.0, id="tiny_negative"),
            pytest.param(-0.0, 0.0, id="negative_zero"),
            pytest.param(1e18, 1e18 % 360.0, id="huge"),
        ],
    )
    def test_circular(self, value, expected):
        result = circular(value)
        assert result == expected
        assert 0.0 <= result < 360.0

    def test_no_negative_zero(self):
        assert str(circular(-0.0)) == "0.0"

    def test_period(self):
        assert circular(-6.0, 24.0) == 18.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, value):
        with pytest.raises(NonFiniteInput):
            circular(value)


class TestRoundHalfAway:

    @pytest.mark.parametrize(
        "number, ndigits, expected",
        [
            pytest.param(2.5, 0, 3.0, id="half_up"),
            pytest.param(-2.5, 0, -3.0, id="half_down"),
            pytest.param(0.125, 2, 0.13, id="decimal_half"),
            pytest.param(1.005, 2, 1.01, id="shortest_repr"),
            pytest.param(59.99996, 4, 60.0, id="carry"),
            pytest.param(1.23456, 3, 1.235, id="plain"),
            pytest.param(1e300, 2, 1e300, id="huge"),
        ],
    )
    def test_round(self, number, ndigits, expected):
        assert round_half_away(number, ndigits) == expected


class TestTrimmedDigits:

    @pytest.mark.parametrize(
        "number, expected",
        [
            pytest.param(0.0, 1, id="zero"),
            pytest.param(1.5, 2, id="simple"),
            pytest.param(150.0, 2, id="trailing_zeros"),
            pytest.param(0.00123, 3, id="small"),
            pytest.param(0.1 + 0.2, 1, id="binary_noise"),
            pytest.param(-48.23, 4, id="negative"),
        ],
    )
    def test_trimmed_digits(self, number, expected):
        assert trimmed_digits(number) == expected


class TestMagnitude:

    @pytest.mark.parametrize(
        "number, expected",
        [
            pytest.param(0.0, 0, id="zero"),
            pytest.param(1.0, 0, id="one"),
            pytest.param(999.9, 2, id="below_power"),
            pytest.param(1000.0, 3, id="exact_power"),
            pytest.param(0.001, -3, id="exact_negative_power"),
            pytest.param(0.0025, -3, id="small"),
            pytest.param(-250.0, 2, id="negative"),
            pytest.param(1e-300, -300, id="tiny"),
            pytest.param(1e308, 308, id="huge"),
            pytest.param(-1.7976931348623157e308, 308, id="float_max"),
            pytest.param(5e-324, -324, id="denormal"),
        ],
    )
    def test_magnitude(self, number, expected):
        assert magnitude(number) == expected


class TestFmtDecimal:

    @pytest.mark.parametrize(
        "number, precision, expected",
        [
            pytest.param(1.5, None, "1.5", id="natural"),
            pytest.param(150.0, None, "150", id="natural_integer"),
            pytest.param(0.1 + 0.2, None, "0.3", id="natural_noise"),
            pytest.param(1e-7, None, "0.0000001", id="natural_small"),
            pytest.param(1.5e20, None, "150000000000000000000", id="natural_large"),
            pytest.param(1.5, -3, "1.5", id="natural_code"),
            pytest.param(2.5, 0, "3", id="integer"),
            pytest.param(1234.5, -1, "1235", id="integer_minutes_code"),
            pytest.param(2.5, -2, "3", id="integer_degrees_code"),
            pytest.param(1.5, 3, "1.500", id="decimals"),
            pytest.param(-0.0001, 2, "0.00", id="no_negative_zero"),
            pytest.param(-0.0, None, "0", id="negative_zero_natural"),
            pytest.param(-1.25, 1, "-1.3", id="negative_half_away"),
        ],
    )
    def test_fmt_decimal(self, number, precision, expected):
        assert fmt_decimal(number, precision) == expected

    def test_precision_capped(self):
        text = fmt_decimal(123.456, 40)
        assert len(text.split(".")[1]) == 15
        assert text.startswith("123.456")

    def test_no_exponent(self):
        assert "e" not in fmt_decimal(4.823e-17)
        assert "e" not in fmt_decimal(6.02e23)
