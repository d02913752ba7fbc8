#
# Axisfmt - Generic Formatter Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from axisfmt.exceptions import InvalidNumericInput, NonFiniteInput
from axisfmt.generic import GenericFormatter, parse_number


# Tests ----------------------------------------------------------------------------------------------------------------

class TestGenericFormatter:

    @pytest.mark.parametrize(
        "value, precision, expected",
        [
            pytest.param(152.2345, None, "152.2345", id="natural"),
            pytest.param(152.2345, 2, "152.23", id="two_decimals"),
            pytest.param(2.5, 0, "3", id="integer"),
            pytest.param(-2.5, -1, "-3", id="integer_negative"),
            pytest.param(-0.004, 2, "0.00", id="no_negative_zero"),
            pytest.param(1e-7, None, "0.0000001", id="small"),
            pytest.param(7, None, "7", id="int"),
        ],
    )
    def test_format(self, value, precision, expected):
        assert GenericFormatter().format(value, precision) == expected

    def test_format_non_finite(self):
        with pytest.raises(NonFiniteInput):
            GenericFormatter().format(float("nan"))

    @pytest.mark.parametrize("value", [1e308, -1.7976931348623157e308])
    def test_format_float_extremes(self, value):
        text = GenericFormatter().format(value)
        assert "e" not in text
        assert float(text) == value

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("152.2345", 152.2345, id="decimal"),
            pytest.param(" 1.5e3 ", 1500.0, id="exponent"),
            pytest.param("-7", -7.0, id="negative"),
        ],
    )
    def test_parse(self, text, expected):
        assert GenericFormatter().parse(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "1.5 m", "nan", "-inf"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidNumericInput):
            GenericFormatter().parse(text)

    def test_parse_non_str(self):
        with pytest.raises(TypeError):
            parse_number(1.5)

    @pytest.mark.parametrize("value", [152.2345, -0.001, 6.02e23])
    def test_round_trip(self, value):
        fmt = GenericFormatter()
        assert fmt.parse(fmt.format(value)) == pytest.approx(value, rel=1e-14)

    def test_contract(self):
        fmt = GenericFormatter()
        assert fmt.describe() == "Generic Coordinate Axis Position Formatter"
        assert fmt.clone() == fmt
        assert repr(fmt) == "GenericFormatter()"
