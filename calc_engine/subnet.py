"""
IPv4 subnetting arithmetic.

Addresses are handled as unsigned 32-bit integers internally:
    network   = ip & mask
    broadcast = network | ~mask          (network itself for /32)
    usable    = 2^(32 - prefix) - 2      (0 for /31 and /32)

Dotted-decimal strings are strict: four groups, each 0-255, no leading
zeros ("01" is rejected, not normalised).
"""

import re
from ipaddress import IPv4Address as _StdIPv4Address, ip_network
from typing import Optional

from calc_engine.errors import InvalidAddress, InvalidPrefix
from calc_engine.models import IPv4Address, SubnetReport

ALL_ONES = 0xFFFFFFFF
NOT_APPLICABLE = 'N/A'

# RFC 1918 private ranges
RFC1918_RANGES = [
    ip_network('10.0.0.0/8'),
    ip_network('172.16.0.0/12'),
    ip_network('192.168.0.0/16'),
]


def is_valid_ipv4(ip) -> bool:
    """True for exactly four dot-separated decimal octets, 0-255, no leading zeros."""
    try:
        IPv4Address.from_string(ip)
    except InvalidAddress:
        return False
    return True


def parse_ipv4(ip: str) -> IPv4Address:
    """Parse a dotted-decimal string. Raises InvalidAddress."""
    return IPv4Address.from_string(ip)


def ip_to_u32(ip: str) -> int:
    """Big-endian packing of the four octets. Callers validate first."""
    return parse_ipv4(ip).to_int()


def u32_to_ip(value: int) -> str:
    return str(IPv4Address.from_int(value))


def _check_prefix(prefix) -> int:
    if isinstance(prefix, bool) or not isinstance(prefix, int) or not 0 <= prefix <= 32:
        raise InvalidPrefix(prefix)
    return prefix


def _mask_bits(prefix: int) -> int:
    # /0 is the empty mask
    if prefix == 0:
        return 0
    return (ALL_ONES << (32 - prefix)) & ALL_ONES


def cidr_to_mask(prefix: int) -> str:
    """
    Subnet mask for a CIDR prefix, e.g. 24 -> '255.255.255.0'.

    Raises:
        InvalidPrefix: prefix is not an int in [0, 32].
    """
    return u32_to_ip(_mask_bits(_check_prefix(prefix)))


def cidr_to_wildcard(prefix: int) -> str:
    """
    Wildcard (inverse) mask for a CIDR prefix, e.g. 24 -> '0.0.0.255'.

    Raises:
        InvalidPrefix: prefix is not an int in [0, 32].
    """
    _check_prefix(prefix)
    if prefix == 32:
        return '0.0.0.0'
    if prefix == 0:
        return '255.255.255.255'
    return u32_to_ip(~_mask_bits(prefix) & ALL_ONES)


def u32_to_binary(value: int) -> str:
    """Four zero-padded 8-bit groups joined by dots."""
    bits = format(value & ALL_ONES, '032b')
    return '.'.join(bits[i:i + 8] for i in range(0, 32, 8))


def ip_to_binary(ip: str) -> Optional[str]:
    """Dotted binary rendering of an address, or None if the address is invalid."""
    if not is_valid_ipv4(ip):
        return None
    return u32_to_binary(ip_to_u32(ip))


def format_ip_binary(bits: Optional[str]) -> str:
    """
    Reformat a raw or already-dotted bit string into the dotted 32-bit shape.

    Spaces and dots are dropped and the result left-padded to 32 bits.
    Returns 'N/A' for a missing value and 'Invalid Binary Length' when more
    than 32 bits remain.
    """
    if not bits:
        return NOT_APPLICABLE
    raw = re.sub(r'[\s.]', '', bits).rjust(32, '0')
    if len(raw) != 32:
        return 'Invalid Binary Length'
    return '.'.join(raw[i:i + 8] for i in range(0, 32, 8))


def ip_class(ip: str) -> str:
    """Classful network class (A-E) from the first octet."""
    first = parse_ipv4(ip).octet1
    if first < 128:
        return 'A'
    if first < 192:
        return 'B'
    if first < 224:
        return 'C'
    if first < 240:
        return 'D'
    return 'E'


def is_private(ip: str) -> bool:
    """True if the address falls in an RFC 1918 range."""
    address = _StdIPv4Address(ip_to_u32(ip))
    return any(address in net for net in RFC1918_RANGES)


def subnet_report(ip: str, prefix: int) -> SubnetReport:
    """
    Full subnet breakdown for an address and prefix length.

    Args:
        ip: Dotted-decimal IPv4 address (any host inside the subnet).
        prefix: CIDR prefix length, 0-32.

    Returns:
        SubnetReport. first/last usable host are 'N/A' for /31 and /32,
        where usable_hosts is 0.

    Raises:
        InvalidPrefix: prefix outside [0, 32].
        InvalidAddress: ip is not a valid dotted-decimal address.
    """
    _check_prefix(prefix)
    ip_num = ip_to_u32(ip)
    mask = _mask_bits(prefix)

    network = ip_num & mask
    broadcast = network if prefix == 32 else network | (~mask & ALL_ONES)
    total_hosts = 2 ** (32 - prefix)

    if prefix >= 31:
        usable_hosts = 0
        first_usable = last_usable = NOT_APPLICABLE
    else:
        usable_hosts = total_hosts - 2
        first_usable = u32_to_ip(network + 1)
        last_usable = u32_to_ip(broadcast - 1)

    return SubnetReport(
        ip_address=ip,
        prefix=prefix,
        subnet_mask=u32_to_ip(mask),
        wildcard_mask=cidr_to_wildcard(prefix),
        network_address=u32_to_ip(network),
        broadcast_address=u32_to_ip(broadcast),
        first_usable_host=first_usable,
        last_usable_host=last_usable,
        total_hosts=total_hosts,
        usable_hosts=usable_hosts,
        binary_ip_address=u32_to_binary(ip_num),
        binary_subnet_mask=u32_to_binary(mask),
        binary_network_address=u32_to_binary(network),
        binary_broadcast_address=u32_to_binary(broadcast),
        ip_class=ip_class(ip),
        is_private=is_private(ip),
    )


def calculate_subnet_details(ip: str, prefix: int) -> Optional[SubnetReport]:
    """
    Like subnet_report(), but a bad address string is an expected user-input
    outcome and returns None. An out-of-range prefix still raises InvalidPrefix.
    """
    _check_prefix(prefix)
    if not is_valid_ipv4(ip):
        return None
    return subnet_report(ip, prefix)
