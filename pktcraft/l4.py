"""Serialisation of TCP and UDP headers into wire bytes."""

from __future__ import annotations

from .byteutil import convert_n_to_bytes
from .headers import TcpHeader, UdpHeader

_TCP_BASE_LENGTH = 20


def _encode_fields(fields: tuple[tuple[int, int], ...]) -> bytes:
    return b"".join(convert_n_to_bytes(value, size) for value, size in fields)


def pack_tcp(header: TcpHeader) -> bytes:
    """Encode a TCP header, its options and its payload in network order.

    The data offset is computed from the length of the options; the
    ``data_offset`` field of the header is not used.
    """
    options = bytes(header.options or b"")
    payload = bytes(header.payload or b"")

    data_offset = (_TCP_BASE_LENGTH + len(options)) // 4
    control = (
        (data_offset << 12) | (header.reserved << 9) | (header.flags & 0x01FF)
    ) & 0xFFFF

    fields = (
        (header.src_port, 2),
        (header.dst_port, 2),
        (header.sequence_number, 4),
        (header.ack_nowledgment_number, 4),
        (control, 2),
        (header.window, 2),
        (header.checksum, 2),
        (header.urgent_pointer, 2),
    )
    return _encode_fields(fields) + options + payload


def pack_udp(header: UdpHeader) -> bytes:
    """Encode a UDP header followed by its payload in network order."""
    payload = bytes(header.payload or b"")
    fields = (
        (header.src_port, 2),
        (header.dst_port, 2),
        (header.length, 2),
        (header.checksum, 2),
    )
    return _encode_fields(fields) + payload