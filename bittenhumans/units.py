#
# Bittenhumans Byte Size Units
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from enum import IntEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value
from .validators import validate_byte_count


# @formatter:off

class UnitsConf:
    """
    Configuration constants for byte size formatting.

    Attributes:
        PREFIXES: Unit prefix per magnitude exponent, shared by both numeral systems.
        BINARY_INFIX: Inserted after the prefix in binary units - KiB, MiB, GiB.
        BYTE_SYMBOL: The base unit symbol.
        PRECISION: Decimal digits rendered after the point.
        SEPARATOR: Separator between number and unit.
    """
    PREFIXES = {
        0: "",   # byte
        1: "K",  # kilo  10³  | kibi 2¹⁰
        2: "M",  # mega  10⁶  | mebi 2²⁰
        3: "G",  # giga  10⁹  | gibi 2³⁰
        4: "T",  # tera  10¹² | tebi 2⁴⁰
        5: "P",  # peta  10¹⁵ | pebi 2⁵⁰
        6: "E",  # exa   10¹⁸ | exbi 2⁶⁰
        7: "Z",  # zetta 10²¹ | zebi 2⁷⁰
        8: "Y",  # yotta 10²⁴ | yobi 2⁸⁰
    }
    BINARY_INFIX = "i"
    BYTE_SYMBOL = "B"
    PRECISION = 2
    SEPARATOR = " "

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class NumeralSystem(IntEnum):
    """
    Numeral systems for byte sizes, the member value is the scaling base.

    Attributes:
        DECIMAL (int) : SI scale, 1 KB = 1000 B
        BINARY (int)  : IEC scale, 1 KiB = 1024 B
    """
    DECIMAL = 1000
    BINARY = 1024

    @property
    def base(self) -> int:
        return int(self)

    @property
    def infix(self) -> str:
        return UnitsConf.BINARY_INFIX if self is NumeralSystem.BINARY else ""


@unique
class Magnitude(IntEnum):
    """
    Ordered magnitude tiers, the member value is the power of the numeral system base.

    Tiers compare by exponent, so Magnitude.KILO < Magnitude.MEGA.
    """
    BASE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4
    PETA = 5
    EXA = 6
    ZETTA = 7
    YOTTA = 8

    @property
    def exponent(self) -> int:
        return int(self)

    @property
    def prefix(self) -> str:
        return UnitsConf.PREFIXES[self.exponent]

    def divisor(self, system: NumeralSystem | str | int) -> int:
        """Bytes in one unit of this tier under the given numeral system."""
        return divisor(system, self)

    def label(self, system: NumeralSystem | str | int) -> str:
        """Unit label of this tier under the given numeral system."""
        return unit_label(system, self)


@dataclass(frozen=True)
class ByteSizeFormatter:
    """
    Formats byte counts in a fixed unit, e.g. "1.50 MB" or "1.43 MiB".

    A formatter holds only its numeral system and magnitude tier, it is immutable
    and may be shared freely. Values are rendered with exactly two decimal digits,
    rounded half-up from the exact quotient, so even counts far beyond float
    precision format without loss.

    For most use cases, prefer the factory class methods:
    - ByteSizeFormatter.new() for a unit known in advance
    - ByteSizeFormatter.fit() for the unit of a reference value, reused for related values
    - ByteSizeFormatter.format_auto() for a one-off value in its own best unit

    Both fields accept lenient input which is normalized to enum members:
    system as NumeralSystem, "decimal" | "binary" or 1000 | 1024;
    magnitude as Magnitude, int exponent, member name like "giga" or prefix like "G".

    Examples:
        >>> ByteSizeFormatter.format_auto(1_500_000, NumeralSystem.DECIMAL)
        '1.50 MB'
        >>> ByteSizeFormatter.format_auto(1_500_000, NumeralSystem.BINARY)
        '1.43 MiB'
        >>> gb = ByteSizeFormatter.new(NumeralSystem.DECIMAL, Magnitude.GIGA)
        >>> gb.format_value(250_000_000_000)
        '250.00 GB'
    """

    system: NumeralSystem
    magnitude: Magnitude

    def __post_init__(self):
        object.__setattr__(self, 'system', _parse_system(self.system))
        object.__setattr__(self, 'magnitude', _parse_magnitude(self.magnitude))

    @classmethod
    def new(cls, system: NumeralSystem | str | int, magnitude: Magnitude | str | int) -> Self:
        """
        Create a formatter fixed to the given numeral system and magnitude.

        Examples:
            >>> ByteSizeFormatter.new(NumeralSystem.DECIMAL, Magnitude.KILO).format_value(1000)
            '1.00 KB'
            >>> ByteSizeFormatter.new("binary", "M").format_value(1024 * 1024)
            '1.00 MiB'
        """
        return cls(system=system, magnitude=magnitude)

    @classmethod
    def fit(cls, byte_count: int, system: NumeralSystem | str | int) -> Self:
        """
        Create a formatter for the largest magnitude that fits the given byte count.

        Format a reference value once to pick the unit, then reuse the formatter for
        related values so all of them are displayed in the same unit, even values
        which alone would pick a smaller one.

        Args:
            byte_count: Reference byte count, e.g. total disk capacity.
            system: Numeral system to use.

        Returns:
            Formatter fixed to the magnitude chosen by select_magnitude().

        Examples:
            >>> disk_total = 1_000_000_000
            >>> formatter = ByteSizeFormatter.fit(disk_total, NumeralSystem.BINARY)
            >>> formatter.format_value(disk_total)
            '953.67 MiB'
            >>> formatter.format_value(disk_total // 1000)
            '0.95 MiB'
        """
        return cls(system=system, magnitude=select_magnitude(byte_count, system))

    @classmethod
    def format_auto(cls, byte_count: int, system: NumeralSystem | str | int) -> str:
        """
        Format a byte count in the largest unit for which the value is at least 1.

        Counts below one kilo-unit, including zero, are formatted in bytes: "512.00 B".
        """
        return cls.fit(byte_count, system).format_value(byte_count)

    @property
    def divisor(self) -> int:
        """Bytes in one unit of this formatter."""
        return divisor(self.system, self.magnitude)

    @property
    def unit(self) -> str:
        """Unit label, e.g. 'KB' or 'GiB'."""
        return unit_label(self.system, self.magnitude)

    def scale(self, byte_count: int) -> float:
        """
        Byte count expressed in the units of this formatter, not rounded.

        Overflows to inf for counts beyond the float range.
        """
        count = validate_byte_count(byte_count)
        try:
            return count / self.divisor
        except OverflowError:
            return math.inf

    def format_value(self, byte_count: int) -> str:
        """
        Format a byte count in the unit of this formatter.

        Examples:
            >>> ByteSizeFormatter.new(NumeralSystem.BINARY, Magnitude.KILO).format_value(512)
            '0.50 KiB'
        """
        count = validate_byte_count(byte_count)
        number = _fixed_point(count, self.divisor, precision=UnitsConf.PRECISION)
        return f"{number}{UnitsConf.SEPARATOR}{self.unit}"


# Methods --------------------------------------------------------------------------------------------------------------

def divisor(system: NumeralSystem | str | int, magnitude: Magnitude | str | int) -> int:
    """
    Bytes in one unit: system base raised to the magnitude exponent.

    Examples:
        >>> divisor(NumeralSystem.BINARY, Magnitude.KILO)
        1024
        >>> divisor(NumeralSystem.DECIMAL, Magnitude.EXA)
        1000000000000000000
    """
    system = _parse_system(system)
    magnitude = _parse_magnitude(magnitude)
    return system.base ** magnitude.exponent


def unit_label(system: NumeralSystem | str | int, magnitude: Magnitude | str | int) -> str:
    """
    Unit label such as 'MB' or 'MiB'; the base tier is 'B' in both systems.
    """
    system = _parse_system(system)
    magnitude = _parse_magnitude(magnitude)
    if magnitude is Magnitude.BASE:
        return UnitsConf.BYTE_SYMBOL
    return f"{magnitude.prefix}{system.infix}{UnitsConf.BYTE_SYMBOL}"


def select_magnitude(byte_count: int, system: NumeralSystem | str | int) -> Magnitude:
    """
    Select the highest magnitude whose divisor does not exceed the byte count.

    Zero selects Magnitude.BASE, counts beyond the largest tier are clamped to it.

    Examples:
        >>> select_magnitude(999, NumeralSystem.DECIMAL)
        <Magnitude.BASE: 0>
        >>> select_magnitude(1000, NumeralSystem.DECIMAL)
        <Magnitude.KILO: 1>
        >>> select_magnitude(1000, NumeralSystem.BINARY)
        <Magnitude.BASE: 0>
    """
    count = validate_byte_count(byte_count)
    system = _parse_system(system)

    for magnitude in reversed(Magnitude):
        if count >= divisor(system, magnitude):
            return magnitude

    return Magnitude.BASE


# Private methods ------------------------------------------------------------------------------------------------------

_prefix_exponents = {prefix: exp for exp, prefix in UnitsConf.PREFIXES.items()}


def _fixed_point(numerator: int, denominator: int, precision: int) -> str:
    """
    Exact quotient of two ints as a fixed-point string, rounded half-up.

    Examples:
        >>> _fixed_point(1_500_000, 1_048_576, precision=2)
        '1.43'
        >>> _fixed_point(5, 1000, precision=2)
        '0.01'
    """
    scale = 10 ** precision
    quotient, remainder = divmod(numerator * scale, denominator)
    if 2 * remainder >= denominator:
        quotient += 1

    whole, fraction = divmod(quotient, scale)
    if precision == 0:
        return str(whole)
    return f"{whole}.{fraction:0{precision}d}"


def _parse_system(system: NumeralSystem | str | int) -> NumeralSystem:
    """
    Parse a numeral system from its name or base.

    Raises:
         ValueError if system is an unknown name or base.
         TypeError if system is not a NumeralSystem | str | int.

    Examples:
        >>> _parse_system("Binary")
        <NumeralSystem.BINARY: 1024>
        >>> _parse_system(1000)
        <NumeralSystem.DECIMAL: 1000>
    """
    if isinstance(system, NumeralSystem):
        return system

    elif isinstance(system, str):
        name = system.strip().upper()
        if name not in NumeralSystem.__members__:
            raise ValueError(
                f"Invalid numeral system name: {fmt_value(system)}, "
                f"expected one of {tuple(m.name.lower() for m in NumeralSystem)}"
            )
        return NumeralSystem[name]

    elif isinstance(system, int) and not isinstance(system, bool):
        if system not in tuple(NumeralSystem):
            raise ValueError(
                f"Invalid numeral system base: {fmt_value(system)}, "
                f"expected one of {tuple(m.base for m in NumeralSystem)}"
            )
        return NumeralSystem(system)

    raise TypeError(f"numeral system must be NumeralSystem | str | int, but got {fmt_type(system)}")


def _parse_magnitude(magnitude: Magnitude | str | int) -> Magnitude:
    """
    Parse a magnitude from its exponent, member name or unit prefix.

    Raises:
         ValueError if magnitude is an unknown name, prefix or exponent.
         TypeError if magnitude is not a Magnitude | str | int.

    Examples:
        >>> _parse_magnitude("giga")
        <Magnitude.GIGA: 3>
        >>> _parse_magnitude("k")
        <Magnitude.KILO: 1>
        >>> _parse_magnitude(4)
        <Magnitude.TERA: 4>
    """
    if isinstance(magnitude, Magnitude):
        return magnitude

    elif isinstance(magnitude, str):
        key = magnitude.strip().upper()
        if key in Magnitude.__members__:
            return Magnitude[key]
        if key in _prefix_exponents:
            return Magnitude(_prefix_exponents[key])
        raise ValueError(
            f"Invalid magnitude string value: {fmt_value(magnitude)}, "
            f"expected a name like 'giga' or one of prefixes {tuple(_prefix_exponents)}"
        )

    elif isinstance(magnitude, int) and not isinstance(magnitude, bool):
        if magnitude not in tuple(Magnitude):
            raise ValueError(
                f"Invalid magnitude exponent: {fmt_value(magnitude)}, "
                f"expected one of {tuple(m.exponent for m in Magnitude)}"
            )
        return Magnitude(magnitude)

    raise TypeError(f"magnitude must be Magnitude | str | int, but got {fmt_type(magnitude)}")


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure every magnitude tier has a unit prefix.
if set(UnitsConf.PREFIXES.keys()) != {m.exponent for m in Magnitude}:
    raise AssertionError(
        "Configuration Error: UnitsConf.PREFIXES keys must match Magnitude exponents."
    )
