#
# Axisfmt - ABC Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from axisfmt.abc import AxisPosFormatter, Precision, std_precision
from axisfmt.exceptions import FormatError, InvalidNumericInput, NonFiniteInput, UnrecognizedUnit


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class Doubler(AxisPosFormatter):
    """Minimal concrete formatter for testing the base contract."""

    def __init__(self):
        self.calls = []

    def format(self, value, precision=None):
        self.calls.append(value)
        return str(value * 2)

    def parse(self, text):
        return float(text) / 2


# Tests ----------------------------------------------------------------------------------------------------------------

class TestAxisPosFormatter:

    def test_abstract(self):
        with pytest.raises(TypeError):
            AxisPosFormatter()

    def test_defaults(self):
        fmt = Doubler()
        assert fmt.describe() == "Coordinate Axis Position Formatter"
        assert str(fmt) == fmt.describe()
        assert repr(fmt) == "Doubler()"

    def test_clone_is_independent(self):
        fmt = Doubler()
        copy = fmt.clone()
        assert type(copy) is Doubler
        assert copy is not fmt
        copy.calls = [1]
        assert fmt.calls == []


class TestPrecision:

    def test_codes(self):
        assert [int(p) for p in Precision] == [-3, -2, -1, 0]

    @pytest.mark.parametrize(
        "precision, max_precision, expected",
        [
            pytest.param(None, 4, -3, id="none"),
            pytest.param(-3, 4, -3, id="natural"),
            pytest.param(-100, 4, -3, id="far_below"),
            pytest.param(-2, 4, -2, id="degrees"),
            pytest.param(0, 4, 0, id="seconds"),
            pytest.param(3, 4, 3, id="decimals"),
            pytest.param(9, 4, 4, id="clamped"),
            pytest.param(Precision.MINUTES, 15, -1, id="enum"),
        ],
    )
    def test_std_precision(self, precision, max_precision, expected):
        result = std_precision(precision, max_precision)
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize("precision", [1.0, "2", True])
    def test_std_precision_type(self, precision):
        with pytest.raises(TypeError):
            std_precision(precision, 4)


class TestExceptions:

    @pytest.mark.parametrize("exc_type", [InvalidNumericInput, UnrecognizedUnit, NonFiniteInput])
    def test_hierarchy(self, exc_type):
        assert issubclass(exc_type, FormatError)
        assert issubclass(exc_type, ValueError)
