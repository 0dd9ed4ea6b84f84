"""Errors raised while parsing addresses and encoding header fields."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for every parsing and encoding error of the package."""

    message = "Parse error"

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self.message,)))

    def __str__(self) -> str:
        return self.message

    def _key(self) -> tuple:
        return (type(self),)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class InvalidMac(ParseError):
    """A MAC address does not have six two-digit groups."""

    message = "Invalid MAC address"


class InvalidIpv4(ParseError):
    """An IPv4 octet is not a decimal number from 0 to 255."""

    message = "Invalid IPv4 address"


class TooManyOctets(ParseError):
    """An IPv4 address has more than four octets."""

    message = "Too many octets in IPv4"


class NotEnoughOctets(ParseError):
    """An IPv4 address has fewer than four octets."""

    message = "Not enough octets in IPv4"


class InvalidHex(ParseError):
    """A value is not valid hexadecimal or does not fit in a byte."""

    message = "Invalid hex value"


class InvalidLength(ParseError):
    """A length is not acceptable."""

    message = "Invalid length"


class InvalidLengthBytes(ParseError):
    """A byte width other than 2, 4 or 8 was requested."""

    message = "Invalid length bytes"

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.size = size

    def _key(self) -> tuple:
        return (type(self), self.size)


class ValueTooLarge(ParseError):
    """A value does not fit in the requested number of bytes."""

    message = "Value too large to fit in requested size"

    def __init__(self, value: int, size: int) -> None:
        super().__init__(value, size)
        self.value = value
        self.size = size

    def _key(self) -> tuple:
        return (type(self), self.value, self.size)