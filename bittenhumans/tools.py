#
# Bittenhumans Message Formatting Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class FmtStyle(str, Enum):
    """
    Styles of type-value tokens rendered into exception messages.

    Members are str subclasses and can be passed wherever a plain style string is expected.
    """
    ASCII = "ascii"
    UNICODE_ANGLE = "unicode-angle"


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, style: str = "ascii", max_repr: int = 60) -> str:
    """
    Format the type of an object, or a type itself, for exception messages.

    Args:
        obj: An instance or a type.
        style: "ascii" (default) or "unicode-angle".
        max_repr: Maximum length of the type name before truncation.

    Returns:
        Token like "<type: str>" or "⟨type: NumeralSystem⟩".

    Examples:
        >>> fmt_type("GiB")
        '<type: str>'
        >>> fmt_type(float)
        '<type: float>'
    """
    target = obj if isinstance(obj, type) else type(obj)
    name = getattr(target, "__name__", None) or str(target)
    return _fmt_pair("type", _fmt_truncate(name, max_repr, _fmt_ellipsis(style)), style)


def fmt_value(x: Any, *, style: str = "ascii", max_repr: int = 60) -> str:
    """
    Format a value as a type-value pair for exception messages.

    A broken __repr__ never propagates: its failure is shown in place of the repr.

    Examples:
        >>> fmt_value(-1)
        '<int: -1>'
        >>> fmt_value("zebi")
        "<str: 'zebi'>"
    """
    t = type(x).__name__
    try:
        r = repr(x)
    except Exception as e:
        r = f"<{t} object (repr failed: {type(e).__name__})>"

    if style == FmtStyle.ASCII:
        r = r.replace(">", "\\>")

    return _fmt_pair(t, _fmt_truncate(r, max_repr, _fmt_ellipsis(style)), style)


# Private methods ------------------------------------------------------------------------------------------------------

def _fmt_ellipsis(style: str) -> str:
    return "..." if style == FmtStyle.ASCII else "…"


def _fmt_pair(type_name: str, value_repr: str, style: str) -> str:
    if style == FmtStyle.UNICODE_ANGLE:
        return f"⟨{type_name}: {value_repr}⟩"
    return f"<{type_name}: {value_repr}>"


def _fmt_truncate(s: str, max_len: int, ellipsis: str) -> str:
    """
    Cut s to max_len characters and append ellipsis.

    Quoted reprs keep their quotes, the ellipsis goes after the closing one.
    """
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner = s[1:1 + max(1, max_len - 2)]
        return f"{s[0]}{inner}{s[0]}{ellipsis}"

    return s[:max(1, max_len)] + ellipsis
