#
# Bittenhumans - Validators Tests
#

# Standard library -----------------------------------------------------------------------------------------------------

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bittenhumans.validators import validate_byte_count


# Tests ----------------------------------------------------------------------------------------------------------------

class IndexLike:
    """Integer scalar exposing only __index__, like NumPy integers."""

    def __init__(self, value: int):
        self.value = value

    def __index__(self) -> int:
        return self.value


class TestValidateByteCount:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, 0, id="zero"),
            pytest.param(1024, 1024, id="int"),
            pytest.param(2 ** 100, 2 ** 100, id="huge-int"),
            pytest.param(IndexLike(42), 42, id="index-protocol"),
        ],
    )
    def test_valid(self, value, expected):
        res = validate_byte_count(value)
        assert res == expected
        assert type(res) is int

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(True, id="bool-true"),
            pytest.param(False, id="bool-false"),
            pytest.param(1.0, id="float"),
            pytest.param("1024", id="str"),
            pytest.param(None, id="none"),
            pytest.param([1], id="list"),
        ],
    )
    def test_type_error(self, value):
        with pytest.raises(TypeError, match=r"byte_count must be int, but got <type: "):
            validate_byte_count(value)

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(-1, id="minus-one"),
            pytest.param(-(2 ** 70), id="huge-negative"),
            pytest.param(IndexLike(-5), id="negative-index-protocol"),
        ],
    )
    def test_negative(self, value):
        with pytest.raises(ValueError, match=r"byte_count must be non-negative, but got <int: -"):
            validate_byte_count(value)

    def test_name_in_message(self):
        with pytest.raises(ValueError, match=r"^disk_used must be non-negative"):
            validate_byte_count(-1, name="disk_used")
