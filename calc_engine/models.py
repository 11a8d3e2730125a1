"""
Shared value types for the calculation engine.

All records are frozen dataclasses: each is built once per query and never
mutated afterwards. The three calculation modules depend on this module and
on calc_engine.errors only, never on each other.
"""

import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from calc_engine.errors import InvalidAddress


# --- IPv4 ---

_OCTET_RE = re.compile(r'0|[1-9][0-9]{0,2}')


@dataclass(frozen=True)
class IPv4Address:
    """Four octets, each 0-255."""
    octet1: int
    octet2: int
    octet3: int
    octet4: int

    @classmethod
    def from_string(cls, ip: str) -> "IPv4Address":
        """
        Parse strict dotted decimal: four groups, each 0-255, no leading zeros.

        Raises:
            InvalidAddress: anything else, including non-string input.
        """
        if not isinstance(ip, str):
            raise InvalidAddress(ip)
        parts = ip.split('.')
        if len(parts) != 4 or not all(_OCTET_RE.fullmatch(part) for part in parts):
            raise InvalidAddress(ip)
        octets = [int(part) for part in parts]
        if any(octet > 255 for octet in octets):
            raise InvalidAddress(ip)
        return cls(*octets)

    @classmethod
    def from_int(cls, value: int) -> "IPv4Address":
        value &= 0xFFFFFFFF
        return cls((value >> 24) & 255, (value >> 16) & 255, (value >> 8) & 255, value & 255)

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        return (self.octet1, self.octet2, self.octet3, self.octet4)

    def to_int(self) -> int:
        """Big-endian packing into an unsigned 32-bit integer."""
        result = 0
        for octet in self.octets:
            result = (result << 8) | octet
        return result

    def __str__(self) -> str:
        return '.'.join(str(o) for o in self.octets)


@dataclass(frozen=True)
class SubnetReport:
    """Snapshot of one (address, prefix) subnet query."""
    ip_address: str
    prefix: int
    subnet_mask: str
    wildcard_mask: str
    network_address: str
    broadcast_address: str
    first_usable_host: str      # "N/A" for /31 and /32
    last_usable_host: str       # "N/A" for /31 and /32
    total_hosts: int
    usable_hosts: int
    binary_ip_address: str
    binary_subnet_mask: str
    binary_network_address: str
    binary_broadcast_address: str
    ip_class: str
    is_private: bool

    def to_dict(self) -> Dict:
        return asdict(self)


# --- Base conversion ---

class Radix(str, Enum):
    BINARY = 'bin'
    DECIMAL = 'dec'
    HEXADECIMAL = 'hex'

    @property
    def base(self) -> int:
        return _RADIX_BASE[self]

    @property
    def pattern(self) -> str:
        """Regex character class of the digit alphabet (ASCII only)."""
        return _RADIX_PATTERN[self]

    @property
    def bit_width(self) -> Optional[int]:
        """Bits per digit, used for display chunking. None for decimal."""
        return _RADIX_BIT_WIDTH[self]


_RADIX_BASE = {Radix.BINARY: 2, Radix.DECIMAL: 10, Radix.HEXADECIMAL: 16}
_RADIX_PATTERN = {
    Radix.BINARY: r'[01]+',
    Radix.DECIMAL: r'[0-9]+',
    Radix.HEXADECIMAL: r'[0-9a-fA-F]+',
}
_RADIX_BIT_WIDTH = {Radix.BINARY: 1, Radix.DECIMAL: None, Radix.HEXADECIMAL: 4}


@dataclass(frozen=True)
class ConversionResult:
    binary: str
    decimal: str
    hexadecimal: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# --- Resistor color code ---

@dataclass(frozen=True)
class ColorCode:
    """Numeric attributes carried by one band color. None = not defined."""
    digit: Optional[int] = None
    multiplier: Optional[float] = None
    tolerance: Optional[float] = None           # percent
    temp_coefficient: Optional[int] = None      # ppm/K


class BandColor(str, Enum):
    BLACK = 'black'
    BROWN = 'brown'
    RED = 'red'
    ORANGE = 'orange'
    YELLOW = 'yellow'
    GREEN = 'green'
    BLUE = 'blue'
    VIOLET = 'violet'
    GRAY = 'gray'
    WHITE = 'white'
    GOLD = 'gold'
    SILVER = 'silver'
    NONE = 'none'

    @property
    def code(self) -> ColorCode:
        return COLOR_CODES[self]

    def attribute(self, name: str):
        """Value of ``digit``/``multiplier``/``tolerance``/``temp_coefficient``, or None."""
        return getattr(COLOR_CODES[self], name)


COLOR_CODES: Dict[BandColor, ColorCode] = {
    BandColor.BLACK:  ColorCode(digit=0, multiplier=1),
    BandColor.BROWN:  ColorCode(digit=1, multiplier=10, tolerance=1, temp_coefficient=100),
    BandColor.RED:    ColorCode(digit=2, multiplier=100, tolerance=2, temp_coefficient=50),
    BandColor.ORANGE: ColorCode(digit=3, multiplier=1e3, temp_coefficient=15),
    BandColor.YELLOW: ColorCode(digit=4, multiplier=1e4, temp_coefficient=25),
    BandColor.GREEN:  ColorCode(digit=5, multiplier=1e5, tolerance=0.5),
    BandColor.BLUE:   ColorCode(digit=6, multiplier=1e6, tolerance=0.25, temp_coefficient=10),
    BandColor.VIOLET: ColorCode(digit=7, multiplier=1e7, tolerance=0.1, temp_coefficient=5),
    BandColor.GRAY:   ColorCode(digit=8, multiplier=1e8, tolerance=0.05, temp_coefficient=1),
    BandColor.WHITE:  ColorCode(digit=9, multiplier=1e9),
    BandColor.GOLD:   ColorCode(multiplier=0.1, tolerance=5),
    BandColor.SILVER: ColorCode(multiplier=0.01, tolerance=10),
    BandColor.NONE:   ColorCode(tolerance=20),
}


class BandRole(str, Enum):
    DIGIT1 = 'digit1'
    DIGIT2 = 'digit2'
    DIGIT3 = 'digit3'
    MULTIPLIER = 'multiplier'
    TOLERANCE = 'tolerance'
    TEMP_COEFFICIENT = 'temp_coefficient'


# Storage slot names in physical order. The slot named "multiplier" holds the
# tolerance band of a 4-band resistor; see resistor.band_roles().
BAND_SLOTS = ('band1', 'band2', 'band3', 'multiplier', 'tolerance', 'temp_coefficient')


@dataclass(frozen=True)
class ResistorBands:
    band1: Optional[BandColor] = None
    band2: Optional[BandColor] = None
    band3: Optional[BandColor] = None
    multiplier: Optional[BandColor] = None
    tolerance: Optional[BandColor] = None
    temp_coefficient: Optional[BandColor] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "ResistorBands":
        """Build from a ``{slot: color name}`` mapping. Unknown colors raise ValueError."""
        unknown = set(data) - set(BAND_SLOTS)
        if unknown:
            raise ValueError(f"Unknown band slots: {sorted(unknown)}")
        return cls(**{
            slot: BandColor(color) if color else None
            for slot, color in data.items()
        })

    def slot(self, index: int) -> Optional[BandColor]:
        return getattr(self, BAND_SLOTS[index])

    @property
    def populated(self) -> int:
        return sum(1 for slot in BAND_SLOTS if getattr(self, slot) is not None)

    def to_dict(self) -> Dict[str, str]:
        """Populated slots only, colors as plain names."""
        return {
            slot: getattr(self, slot).value
            for slot in BAND_SLOTS
            if getattr(self, slot) is not None
        }


@dataclass(frozen=True)
class ResistorValue:
    """Decoded band set. None marks an incomplete or absent quantity."""
    resistance: Optional[float]
    tolerance: Optional[float]
    temp_coefficient: Optional[int]
    formatted: str

    @property
    def complete(self) -> bool:
        return self.resistance is not None and self.tolerance is not None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class BandEncoding:
    bands: ResistorBands
    band_count: int
