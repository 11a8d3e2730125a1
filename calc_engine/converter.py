"""
Positional base conversion between binary, decimal and hexadecimal.

Values are unbounded non-negative Python ints. Input strings are checked
against the radix alphabet before any parsing, so int()'s extra leniency
(underscores, whitespace, 0x prefixes, non-ASCII digits) never leaks through.

Decimal text goes through decimal.Decimal: int(str) and str(int) refuse
inputs longer than sys.get_int_max_str_digits(), Decimal does not.
Binary and hex are power-of-two bases and are not subject to that limit.
"""

import re
from decimal import Decimal
from typing import Optional, Union

from calc_engine.errors import ParseError
from calc_engine.models import ConversionResult, Radix

_RADIX_RE = {radix: re.compile(radix.pattern) for radix in Radix}


def _radix(value: Union[Radix, str]) -> Radix:
    return value if isinstance(value, Radix) else Radix(value)


def parse_in_base(digits: str, radix: Union[Radix, str]) -> Optional[int]:
    """
    Parse a digit string in the given radix.

    Returns:
        The integer value, or None for the empty string (the "empty" result
        that converts to empty output in every radix).

    Raises:
        ParseError: a character falls outside the radix alphabet.
    """
    radix = _radix(radix)
    if digits == '':
        return None
    if not isinstance(digits, str) or not _RADIX_RE[radix].fullmatch(digits):
        raise ParseError(f"{digits!r} is not a valid {radix.name.lower()} number")
    if radix is Radix.DECIMAL:
        return int(Decimal(digits))
    return int(digits, radix.base)


def format_in_base(value: Optional[int], radix: Union[Radix, str]) -> str:
    """Render without leading zeros; hex is uppercase. None renders as ''."""
    radix = _radix(radix)
    if value is None:
        return ''
    if value < 0:
        raise ValueError(f"Only non-negative values can be formatted, got {value}")
    if radix is Radix.BINARY:
        return format(value, 'b')
    if radix is Radix.HEXADECIMAL:
        return format(value, 'X')
    return str(Decimal(value))


def convert(value: str, from_radix: Union[Radix, str], to_radix: Union[Radix, str]) -> Optional[str]:
    """
    Convert a digit string between radices.

    Returns '' for empty input and None when the input does not parse.
    """
    try:
        parsed = parse_in_base(value, from_radix)
    except ParseError:
        return None
    return format_in_base(parsed, to_radix)


def convert_all(value: str, from_radix: Union[Radix, str]) -> Optional[ConversionResult]:
    """
    All three renderings at once, or None if the input does not parse.

    Every field is normalised, the input's own radix included: leading zeros
    are dropped and hex is uppercased, so ('007', 'dec') gives decimal '7'.
    """
    try:
        parsed = parse_in_base(value, from_radix)
    except ParseError:
        return None
    return ConversionResult(
        binary=format_in_base(parsed, Radix.BINARY),
        decimal=format_in_base(parsed, Radix.DECIMAL),
        hexadecimal=format_in_base(parsed, Radix.HEXADECIMAL),
    )


def format_chunked(bits: str, chunk_size: int = 8) -> str:
    """
    Left-pad to a multiple of chunk_size and split into space-separated chunks.

    Examples:
        format_chunked('101010')          → '00101010'
        format_chunked('10101', 4)        → '0001 0101'
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if not bits:
        return ''
    width = -(-len(bits) // chunk_size) * chunk_size
    padded = bits.rjust(width, '0')
    return ' '.join(padded[i:i + chunk_size] for i in range(0, width, chunk_size))


def format_digits(value: str, radix: Union[Radix, str]) -> str:
    """Chunk a binary or hex string on byte boundaries (8 bits / 2 hex digits).

    Decimal has no bit width and is returned unchanged.
    """
    radix = _radix(radix)
    if radix.bit_width is None:
        return value
    return format_chunked(value, 8 // radix.bit_width)
