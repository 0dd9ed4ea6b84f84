import pytest

from pktcraft.errors import (
    InvalidHex,
    InvalidIpv4,
    InvalidLength,
    InvalidLengthBytes,
    InvalidMac,
    NotEnoughOctets,
    ParseError,
    TooManyOctets,
    ValueTooLarge,
)


@pytest.mark.parametrize(
    "error, text",
    [
        (InvalidMac(), "Invalid MAC address"),
        (InvalidIpv4(), "Invalid IPv4 address"),
        (TooManyOctets(), "Too many octets in IPv4"),
        (NotEnoughOctets(), "Not enough octets in IPv4"),
        (InvalidHex(), "Invalid hex value"),
        (InvalidLength(), "Invalid length"),
        (InvalidLengthBytes(3), "Invalid length bytes"),
        (ValueTooLarge(70000, 2), "Value too large to fit in requested size"),
    ],
)
def test_messages(error, text):
    assert str(error) == text


@pytest.mark.parametrize(
    "error, text",
    [
        (InvalidMac(), "Invalid MAC address"),
        (InvalidHex(), "Invalid hex value"),
        (ValueTooLarge(1, 2), "Value too large to fit in requested size"),
    ],
)
@pytest.mark.parametrize("base", [ParseError, ValueError])
def test_all_are_parse_errors_and_value_errors(error, text, base):
    with pytest.raises(base) as info:
        raise error
    assert info.value == error
    assert str(info.value) == text


def test_fields_are_kept():
    error = ValueTooLarge(0x12345678, 2)
    assert error.value == 0x12345678
    assert error.size == 2
    assert InvalidLengthBytes(3).size == 3


def test_equality_by_kind_and_fields():
    assert InvalidMac() == InvalidMac()
    assert InvalidMac() != InvalidHex()
    assert InvalidLengthBytes(3) == InvalidLengthBytes(3)
    assert InvalidLengthBytes(3) != InvalidLengthBytes(5)
    assert ValueTooLarge(70000, 2) == ValueTooLarge(70000, 2)
    assert ValueTooLarge(70000, 2) != ValueTooLarge(70000, 4)


def test_equal_errors_hash_alike():
    assert len({ValueTooLarge(70000, 2), ValueTooLarge(70000, 2)}) == 1


def test_can_be_raised_and_caught_as_base():
    with pytest.raises(ParseError) as info:
        raise TooManyOctets()
    assert info.value == TooManyOctets()