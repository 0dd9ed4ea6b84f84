import pytest

from pktcraft.errors import (
    InvalidHex,
    InvalidIpv4,
    InvalidMac,
    NotEnoughOctets,
    TooManyOctets,
)
from pktcraft.headers import Ipv4Addr
from pktcraft.parsing import parse_hex, parse_ipv4, parse_mac


def test_parse_mac_valid():
    assert parse_mac("01:23:45:67:89:ab") == bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB])


def test_parse_mac_invalid_length():
    with pytest.raises(InvalidMac):
        parse_mac("01:23:45:67:89")


def test_parse_mac_invalid_hex():
    with pytest.raises(InvalidHex):
        parse_mac("01:23:45:67:89:zz")


def test_parse_mac_extra_parts():
    with pytest.raises(InvalidMac):
        parse_mac("01:23:45:67:89:ab:cd")


@pytest.mark.parametrize("mac", ["1:23:45:67:89:ab", "", "01:23:45:67:89:abc"])
def test_parse_mac_bad_group_width(mac):
    with pytest.raises(InvalidMac):
        parse_mac(mac)


def test_parse_mac_rejects_whitespace():
    with pytest.raises(InvalidHex):
        parse_mac("01:23:45:67:89: a")


def test_parse_ipv4_valid():
    assert parse_ipv4("192.168.1.1") == Ipv4Addr((192, 168, 1, 1))


def test_parse_ipv4_invalid_octet():
    with pytest.raises(InvalidIpv4):
        parse_ipv4("192.168.1.256")


def test_parse_ipv4_not_enough_octets():
    with pytest.raises(NotEnoughOctets):
        parse_ipv4("192.168.1")


def test_parse_ipv4_too_many_octets():
    with pytest.raises(TooManyOctets):
        parse_ipv4("192.168.1.1.5")


@pytest.mark.parametrize("ip", ["192.168..1", "a.b.c.d", "192.168.1. 1"])
def test_parse_ipv4_bad_octet_text(ip):
    with pytest.raises(InvalidIpv4):
        parse_ipv4(ip)


def test_parse_ipv4_round_trip():
    assert str(parse_ipv4("192.168.1.1")) == "192.168.1.1"


def test_parse_hex_valid():
    assert parse_hex("0x1A") == 0x1A
    assert parse_hex("ff") == 0xFF


def test_parse_hex_invalid():
    with pytest.raises(InvalidHex):
        parse_hex("0xZZ")


def test_parse_hex_empty():
    with pytest.raises(InvalidHex):
        parse_hex("")


def test_parse_hex_no_prefix():
    assert parse_hex("1f") == 0x1F


def test_parse_hex_too_large():
    with pytest.raises(InvalidHex):
        parse_hex("0x100")


def test_parse_hex_only_prefix():
    with pytest.raises(InvalidHex):
        parse_hex("0x")