"""Parsers for MAC addresses, dotted IPv4 addresses and hex bytes."""

from __future__ import annotations

import re

from .errors import (
    InvalidHex,
    InvalidIpv4,
    InvalidMac,
    NotEnoughOctets,
    TooManyOctets,
)
from .headers import Ipv4Addr

_HEX = re.compile(r"\+?[0-9A-Fa-f]+")
_DEC = re.compile(r"\+?[0-9]+")


def _byte(text: str, pattern: re.Pattern[str], base: int) -> int | None:
    if not pattern.fullmatch(text):
        return None
    value = int(text, base)
    return value if value <= 0xFF else None


def parse_mac(mac: str) -> bytes:
    """Parse ``aa:bb:cc:dd:ee:ff`` into six bytes."""
    result = bytearray()
    for part in mac.split(":"):
        if len(result) >= 6 or len(part) != 2:
            raise InvalidMac()
        value = _byte(part, _HEX, 16)
        if value is None:
            raise InvalidHex()
        result.append(value)
    if len(result) != 6:
        raise InvalidMac()
    return bytes(result)


def parse_ipv4(ip: str) -> Ipv4Addr:
    """Parse a dotted-quad IPv4 address."""
    octets: list[int] = []
    for part in ip.split("."):
        if len(octets) >= 4:
            raise TooManyOctets()
        value = _byte(part, _DEC, 10)
        if value is None:
            raise InvalidIpv4()
        octets.append(value)
    if len(octets) != 4:
        raise NotEnoughOctets()
    return Ipv4Addr(tuple(octets))


def parse_hex(text: str) -> int:
    """Parse a hexadecimal byte, with any number of leading ``0x`` prefixes."""
    while text.startswith("0x"):
        text = text[2:]
    value = _byte(text, _HEX, 16)
    if value is None:
        raise InvalidHex()
    return value