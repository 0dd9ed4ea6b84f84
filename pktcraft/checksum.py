"""The RFC 1071 Internet checksum."""

from __future__ import annotations


def internet_checksum(data: bytes) -> int:
    """Return the one's-complement 16-bit checksum of ``data``."""
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(
        int.from_bytes(data[pos : pos + 2], "big") for pos in range(0, len(data), 2)
    )
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF