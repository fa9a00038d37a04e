#
# Bittenhumans - Tools Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bittenhumans.tools import FmtStyle, fmt_type, fmt_value
from bittenhumans.units import NumeralSystem


# Tests ----------------------------------------------------------------------------------------------------------------

class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("boom")


class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<type: int>", id="instance"),
            pytest.param(float, "<type: float>", id="type"),
            pytest.param(NumeralSystem.BINARY, "<type: NumeralSystem>", id="enum-member"),
            pytest.param(None, "<type: NoneType>", id="none"),
        ],
    )
    def test_ascii(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_unicode_angle(self):
        assert fmt_type("GiB", style=FmtStyle.UNICODE_ANGLE) == "⟨type: str⟩"

    def test_truncate(self):
        assert fmt_type(BrokenRepr, max_repr=4) == "<type: Brok...>"


class TestFmtValue:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(-1, "<int: -1>", id="int"),
            pytest.param("zebi", "<str: 'zebi'>", id="str"),
            pytest.param(1.5, "<float: 1.5>", id="float"),
        ],
    )
    def test_ascii(self, value, expected):
        assert fmt_value(value) == expected

    def test_ascii_escapes_angle(self):
        assert fmt_value("a>b") == "<str: 'a\\>b'>"

    def test_unicode_angle(self):
        assert fmt_value(7, style="unicode-angle") == "⟨int: 7⟩"

    def test_truncate_quoted(self):
        assert fmt_value("abcdefghij", max_repr=6) == "<str: 'abcd'...>"

    def test_broken_repr(self):
        assert fmt_value(BrokenRepr()) == "<BrokenRepr: <BrokenRepr object (repr failed: RuntimeError)\\>>"
