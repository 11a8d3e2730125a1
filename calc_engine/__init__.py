"""
Calc Engine

Pure calculation library behind the electronics and networking study tools:
IPv4 subnetting, binary/decimal/hexadecimal conversion, and resistor
color-code encoding and decoding.

Every function is deterministic and side-effect free.
"""

from calc_engine.subnet import (
    is_valid_ipv4, ip_to_u32, u32_to_ip, cidr_to_mask, cidr_to_wildcard,
    subnet_report, calculate_subnet_details, ip_to_binary, format_ip_binary,
)
from calc_engine.converter import parse_in_base, format_in_base, convert, convert_all, format_chunked
from calc_engine.resistor import decode, encode, parse_value, value_to_bands, format_resistance
from calc_engine.eseries import snap_to_e_series
from calc_engine.models import Radix, BandColor, BandRole, ResistorBands, ResistorValue, SubnetReport

__version__ = "0.1.0"
