"""
Resistor color-code encoding and decoding for 4-, 5- and 6-band parts.

Band roles by band count (physical position → role):

    4-band: digit digit multiplier tolerance
    5-band: digit digit digit multiplier tolerance
    6-band: digit digit digit multiplier tolerance tempco

Storage follows ResistorBands slot order (band1, band2, band3, multiplier,
tolerance, temp_coefficient), so the slot named "band3" holds the multiplier
of a 4-band part and the slot named "multiplier" holds its tolerance.
band_roles() is the only place that knows this.

Encoding searches significand × standard multiplier pairs and accepts the
first (largest multiplier) whose reconstruction is within 0.5% of the
target, falling back to the nearest decade when nothing matches.
"""

import logging
import math
import re
from decimal import Decimal
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from calc_engine.eseries import snap_to_e_series
from calc_engine.errors import (
    CalculationError,
    NoStandardRepresentation,
    ParseError,
    UnsupportedTolerance,
    ValidationError,
)
from calc_engine.models import (
    BAND_SLOTS,
    BandColor,
    BandEncoding,
    BandRole,
    ResistorBands,
    ResistorValue,
)

logger = logging.getLogger(__name__)

BAND_COUNTS = (4, 5, 6)

# Role → storage slot index
_ROLE_SLOTS = {
    4: {
        BandRole.DIGIT1: 0,
        BandRole.DIGIT2: 1,
        BandRole.MULTIPLIER: 2,
        BandRole.TOLERANCE: 3,
    },
    5: {
        BandRole.DIGIT1: 0,
        BandRole.DIGIT2: 1,
        BandRole.DIGIT3: 2,
        BandRole.MULTIPLIER: 3,
        BandRole.TOLERANCE: 4,
    },
    6: {
        BandRole.DIGIT1: 0,
        BandRole.DIGIT2: 1,
        BandRole.DIGIT3: 2,
        BandRole.MULTIPLIER: 3,
        BandRole.TOLERANCE: 4,
        BandRole.TEMP_COEFFICIENT: 5,
    },
}

_DIGIT_ROLES = (BandRole.DIGIT1, BandRole.DIGIT2, BandRole.DIGIT3)

STANDARD_MULTIPLIERS = (1e9, 1e8, 1e7, 1e6, 1e5, 1e4, 1e3, 100, 10, 1, 0.1, 0.01)

# Max relative error for an exact significand/multiplier match
MATCH_TOLERANCE = 0.005

# Tie-break orders for the reverse lookups
MULTIPLIER_PREFERENCE = (
    BandColor.BLACK, BandColor.BROWN, BandColor.RED, BandColor.ORANGE,
    BandColor.YELLOW, BandColor.GREEN, BandColor.BLUE, BandColor.VIOLET,
    BandColor.GRAY, BandColor.WHITE, BandColor.GOLD, BandColor.SILVER,
)
TOLERANCE_PREFERENCE = (
    BandColor.BROWN, BandColor.RED, BandColor.GREEN, BandColor.BLUE,
    BandColor.VIOLET, BandColor.GRAY, BandColor.GOLD, BandColor.SILVER,
    BandColor.NONE,
)

DEFAULT_TOLERANCE = {4: BandColor.GOLD, 5: BandColor.GOLD, 6: BandColor.BROWN}
DEFAULT_TEMP_COEFFICIENT = 100  # ppm/K, brown

_FLOAT_EPSILON = 1e-9

_SI_SCALES = [
    (1e9, ' GΩ'),
    (1e6, ' MΩ'),
    (1e3, ' kΩ'),
]

_VALUE_PREFIXES = {'T': 10 ** 12, 'G': 10 ** 9, 'M': 10 ** 6, 'K': 10 ** 3}
_UNIT_RE = re.compile(r'\s*(?:Ω|Ω|OHMS?)$')
_EMBEDDED_PREFIX_RE = re.compile(r'([0-9]+)([TGMK])([0-9]+)')
_NUMBER_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:E[+-]?[0-9]+)?')


def band_roles(band_count: int) -> Dict[BandRole, int]:
    """Map each role present at this band count to its storage slot index."""
    try:
        return _ROLE_SLOTS[band_count]
    except KeyError:
        raise ValueError(f"band_count must be one of {BAND_COUNTS}, got {band_count!r}") from None


def find_color(
    value: Optional[float],
    attribute: str,
    preferred: Sequence[BandColor] = (),
) -> Optional[BandColor]:
    """
    Reverse lookup: the color whose ``attribute`` equals ``value``.

    Multipliers and tolerances compare within 1e-9; digits and temperature
    coefficients compare exactly. When several colors match, the first one
    listed in ``preferred`` wins, otherwise the first in BandColor order.
    """
    if value is None or not math.isfinite(value):
        return None

    matches = []
    for color in BandColor:
        color_value = color.attribute(attribute)
        if color_value is None:
            continue
        if attribute in ('multiplier', 'tolerance'):
            if abs(color_value - value) < _FLOAT_EPSILON:
                matches.append(color)
        elif color_value == value:
            matches.append(color)

    if not matches:
        return None
    for color in preferred:
        if color in matches:
            return color
    return matches[0]


def _apply_multiplier(significand: int, multiplier: float) -> float:
    # Divide for gold/silver so 47 x 0.1 is exactly 4.7
    if multiplier < 1:
        return significand / round(1 / multiplier)
    return float(significand * multiplier)


def _scale(resistance: float, multiplier: float) -> float:
    if multiplier < 1:
        return resistance * round(1 / multiplier)
    return resistance / multiplier


def format_resistance(ohms: Optional[float]) -> str:
    """
    Human-readable resistance with the largest fitting unit prefix.

    Two decimals at or above 10 in the chosen unit, three below 10 and four
    below 1; trailing zeros are trimmed.

    Examples:
        format_resistance(1000)    → '1 kΩ'
        format_resistance(4700)    → '4.7 kΩ'
        format_resistance(0.33)    → '0.33 Ω'
        format_resistance(None)    → 'N/A'
    """
    if ohms is None or not math.isfinite(ohms):
        return 'N/A'
    if ohms == 0:
        return '0 Ω'

    value, suffix = ohms, ' Ω'
    for scale, unit in _SI_SCALES:
        if abs(ohms) >= scale:
            value, suffix = ohms / scale, unit
            break

    precision = 2
    if abs(value) < 10:
        precision = 3
    if abs(value) < 1:
        precision = 4

    formatted = f"{value:.{precision}f}".rstrip('0').rstrip('.')
    if formatted in ('-0', ''):
        formatted = '0'
    return formatted + suffix


def decode(bands: Union[ResistorBands, Dict], band_count: int) -> ResistorValue:
    """
    Resistance, tolerance and temperature coefficient from a band set.

    A missing digit or multiplier band leaves the resistance None and the
    formatted string 'N/A'. Tolerance and tempco are read from their own
    slots regardless; tempco exists only on 6-band parts and is optional.

    Raises:
        ValueError: band_count is not 4, 5 or 6.
    """
    if isinstance(bands, dict):
        bands = ResistorBands.from_dict(bands)
    roles = band_roles(band_count)

    def read(role: BandRole, attribute: str):
        if role not in roles:
            return None
        color = bands.slot(roles[role])
        return color.attribute(attribute) if color is not None else None

    digits = [read(role, 'digit') for role in _DIGIT_ROLES if role in roles]
    multiplier = read(BandRole.MULTIPLIER, 'multiplier')

    resistance = None
    if multiplier is not None and None not in digits:
        significand = int(''.join(str(d) for d in digits))
        resistance = _apply_multiplier(significand, multiplier)

    return ResistorValue(
        resistance=resistance,
        tolerance=read(BandRole.TOLERANCE, 'tolerance'),
        temp_coefficient=read(BandRole.TEMP_COEFFICIENT, 'temp_coefficient'),
        formatted=format_resistance(resistance),
    )


def parse_value(text: str) -> Optional[float]:
    """
    Parse a human resistance entry into Ohms.

    Accepts a trailing unit word ('Ω', 'ohm', 'ohms'; any case), thousands
    separators, and a T/G/M/k magnitude either as a suffix ('4.7k') or in
    place of the decimal point ('4k7'). Case is folded, so 'm' means mega.

    A leading 'R' decimal marker ('R33') is not recognised.

    Returns:
        Value in Ohms, or None if the text is not a finite number.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    number = _UNIT_RE.sub('', text.strip().replace(',', '').upper()).strip()
    scale = 1

    if number and number[-1] in _VALUE_PREFIXES:
        scale = _VALUE_PREFIXES[number[-1]]
        number = number[:-1].strip()
    else:
        embedded = _EMBEDDED_PREFIX_RE.fullmatch(number)
        if embedded:
            whole, prefix, fraction = embedded.groups()
            scale = _VALUE_PREFIXES[prefix]
            number = f"{whole}.{fraction}"

    if not _NUMBER_RE.fullmatch(number):
        return None
    value = float(Decimal(number) * scale)
    # Exponents past the float range come back as inf
    return value if math.isfinite(value) else None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def significand_and_multiplier(resistance: float, digit_count: int) -> Optional[Tuple[str, float]]:
    """
    Split a resistance into a ``digit_count``-digit significand and a
    standard multiplier.

    Returns:
        (significand digits, multiplier), or None when the value cannot be
        expressed at all (too large, or rounds to zero).
    """
    if resistance == 0:
        return '0' * digit_count, 1

    lower, upper = 10 ** (digit_count - 1), 10 ** digit_count
    for multiplier in STANDARD_MULTIPLIERS:
        significand = _round_half_up(_scale(resistance, multiplier))
        if not lower <= significand < upper:
            continue
        error = abs(_apply_multiplier(significand, multiplier) - resistance) / resistance
        if error <= MATCH_TOLERANCE:
            return str(significand), multiplier

    # Nearest decade for the last significant digit
    exponent = math.floor(math.log10(resistance)) - (digit_count - 1)
    target = 10.0 ** exponent
    multiplier = min(STANDARD_MULTIPLIERS, key=lambda m: abs(m - target))
    significand = _round_half_up(_scale(resistance, multiplier))
    if not 0 < significand < upper:
        logger.debug("No %d-digit representation for %g Ω", digit_count, resistance)
        return None

    logger.debug(
        "Approximating %g Ω as %d x %g (%d digits)",
        resistance, significand, multiplier, digit_count,
    )
    return str(significand).zfill(digit_count), multiplier


def tolerance_color(tolerance: float) -> BandColor:
    """
    Band color for a tolerance percentage.

    Raises:
        UnsupportedTolerance: no color carries exactly this tolerance.
    """
    color = find_color(tolerance, 'tolerance', TOLERANCE_PREFERENCE)
    if color is None:
        raise UnsupportedTolerance(tolerance)
    return color


def encode(
    resistance: Union[float, str],
    tolerance: Optional[float] = None,
    band_counts: Iterable[int] = BAND_COUNTS,
    series: Optional[str] = None,
) -> BandEncoding:
    """
    Color bands for a resistance, trying band counts in preference order.

    Args:
        resistance: Ohms, or a human entry parsed with parse_value().
        tolerance: Percent. None defaults to gold (4-/5-band) or brown (6-band).
        band_counts: Candidate band counts, most preferred first.
        series: Optional E-series name; the value is snapped to that
            series before the band search.

    Returns:
        BandEncoding for the first band count that fully resolves. 6-band
        results carry a brown (100 ppm) temperature coefficient band.

    Raises:
        ParseError: resistance text is not a number.
        ValidationError: resistance is negative or not finite.
        UnsupportedTolerance: tolerance has no standard color.
        NoStandardRepresentation: no candidate band count resolves.
        ValueError: a band count other than 4, 5 or 6 was requested.
    """
    if isinstance(resistance, str):
        parsed = parse_value(resistance)
        if parsed is None:
            raise ParseError(f"Invalid resistance value: {resistance!r}")
        resistance = parsed
    if not math.isfinite(resistance) or resistance < 0:
        raise ValidationError(f"Invalid resistance value: {resistance!r}")

    tolerance_band = tolerance_color(tolerance) if tolerance is not None else None
    band_counts = tuple(band_counts)

    if series and resistance > 0:
        resistance, error_pct = snap_to_e_series(resistance, series)
        logger.debug("Snapped to %s value %g Ω (%+.2f%%)", series, resistance, error_pct)

    for band_count in band_counts:
        roles = band_roles(band_count)
        digit_count = 2 if band_count == 4 else 3

        representation = significand_and_multiplier(resistance, digit_count)
        if representation is None:
            continue
        digits, multiplier = representation

        digit_colors = [find_color(int(d), 'digit') for d in digits]
        multiplier_color = find_color(multiplier, 'multiplier', MULTIPLIER_PREFERENCE)
        if multiplier_color is None or None in digit_colors:
            continue

        slots = {roles[role]: color for role, color in zip(_DIGIT_ROLES, digit_colors)}
        slots[roles[BandRole.MULTIPLIER]] = multiplier_color
        slots[roles[BandRole.TOLERANCE]] = tolerance_band or DEFAULT_TOLERANCE[band_count]
        if BandRole.TEMP_COEFFICIENT in roles:
            slots[roles[BandRole.TEMP_COEFFICIENT]] = find_color(
                DEFAULT_TEMP_COEFFICIENT, 'temp_coefficient', (BandColor.BROWN,)
            )

        bands = ResistorBands(**{BAND_SLOTS[index]: color for index, color in slots.items()})
        return BandEncoding(bands=bands, band_count=band_count)

    raise NoStandardRepresentation(resistance, band_counts)


def value_to_bands(
    text: str,
    tolerance: Optional[float] = None,
    band_counts: Iterable[int] = BAND_COUNTS,
) -> Dict:
    """
    Structured-result wrapper around encode() for user-entered values.

    Returns:
        ``{'bands': {...}, 'band_count': n}`` on success, or
        ``{'error': message}`` for invalid or unsupported input.
    """
    try:
        encoding = encode(text, tolerance, band_counts)
    except CalculationError as e:
        return {'error': str(e)}
    return {'bands': encoding.bands.to_dict(), 'band_count': encoding.band_count}
