"""Plain data records for Ethernet, IPv4, TCP and UDP headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class Ipv4Addr:
    """An IPv4 address held as four octets."""

    octets: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        octets = tuple(self.octets if not isinstance(self.octets, Iterable) else self.octets)
        if len(octets) != 4:
            raise ValueError("an IPv4 address has exactly four octets")
        if any(not 0 <= octet <= 0xFF for octet in octets):
            raise ValueError("IPv4 octets range from 0 to 255")
        object.__setattr__(self, "octets", octets)

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)


@dataclass
class EthernetHeader:
    """An Ethernet II frame header."""

    dst_mac: bytes
    src_mac: bytes
    ethertype: int


@dataclass
class Ipv4Header:
    """An IPv4 packet header."""

    version: int
    ihl: int
    dscp: int
    total_length: int
    identification: int
    flags: int
    fragment_offset: int
    ttl: int
    protocol: int
    header_checksum: int
    src_addr: bytes
    dst_addr: bytes
    options: bytes | None = None


@dataclass
class TcpHeader:
    """A TCP segment header with optional options and payload."""

    src_port: int
    dst_port: int
    sequence_number: int
    ack_nowledgment_number: int
    data_offset: int
    reserved: int
    flags: int
    window: int
    checksum: int
    urgent_pointer: int
    options: bytes | None = None
    payload: bytes | None = None


@dataclass
class UdpHeader:
    """A UDP datagram header with an optional payload."""

    src_port: int
    dst_port: int
    length: int
    checksum: int
    payload: bytes | None = field(default=None)