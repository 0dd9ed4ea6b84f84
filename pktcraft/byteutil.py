"""Big-endian integer encoding and in-place byte copying."""

from __future__ import annotations

from .errors import InvalidLengthBytes, ValueTooLarge

_SIZES = (2, 4, 8)
_U64_LIMIT = 1 << 64


def convert_n_to_bytes(value: int, size: int) -> bytes:
    """Encode an unsigned value as ``size`` big-endian bytes (2, 4 or 8)."""
    if size not in _SIZES:
        raise InvalidLengthBytes(size)
    if value < 0:
        raise ValueError("value must be non-negative")
    if value >= _U64_LIMIT or value >= 1 << (size * 8):
        raise ValueTooLarge(value, size)
    return value.to_bytes(size, "big")


def push_bytes(buf: bytearray, offset: int, data: bytes) -> int:
    """Write ``data`` into ``buf`` at ``offset`` and return the offset after it."""
    end = offset + len(data)
    if offset < 0 or end > len(buf):
        raise IndexError("data does not fit in the buffer")
    buf[offset:end] = data
    return end