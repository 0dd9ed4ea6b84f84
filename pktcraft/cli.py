"""Command-line options for describing the packets to build."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from .errors import ParseError
from .parsing import parse_hex, parse_mac

_VERSION = "0.1.0"
_MISSING = "<missing>"
_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Args:
    """Options given on the command line."""

    src_ip: str | None = None
    dst_ip: str | None = None
    dest_port: int | None = None
    src_mac: bytes | None = None
    dst_mac: bytes | None = None
    l4_protocol: str | None = None
    timeout_ms: int | None = None
    debug_file: str | None = None
    debug_format: str = "json"
    ip_bitfield: int = 0
    dry_run: bool = False
    count: int = 1


def _unsigned(bits: int) -> Callable[[str], int]:
    limit = 1 << bits

    def convert(text: str) -> int:
        if not _DIGITS.fullmatch(text):
            raise argparse.ArgumentTypeError(f"invalid digit found in {text!r}")
        value = int(text)
        if value >= limit:
            raise argparse.ArgumentTypeError(
                f"{value} is not in 0..={limit - 1}"
            )
        return value

    return convert


def _checked(parser: Callable[[str], object]) -> Callable[[str], object]:
    def convert(text: str) -> object:
        try:
            return parser(text)
        except ParseError as err:
            raise argparse.ArgumentTypeError(str(err)) from err

    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = argparse.ArgumentParser(prog="pktcraft")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {_VERSION}"
    )
    parser.add_argument(
        "-s", "--src_ip", dest="src_ip", help="format: --src_ip=192.168.25.2"
    )
    parser.add_argument(
        "-d", "--dst_ip", dest="dst_ip", help="format: --dst_ip=192.168.1.25"
    )
    parser.add_argument(
        "-p",
        "--dest_port",
        dest="dest_port",
        type=_unsigned(16),
        help="format: --dest_port=8080",
    )
    parser.add_argument(
        "-m",
        "--src_mac",
        dest="src_mac",
        type=_checked(parse_mac),
        help="format: --src_mac=aa:bb:cc:dd:ee:ff",
    )
    parser.add_argument(
        "-c",
        "--dst_mac",
        dest="dst_mac",
        type=_checked(parse_mac),
        help="format: --dst_mac=11:22:33:44:55:66",
    )
    parser.add_argument(
        "-l", "--l4_protocol", dest="l4_protocol", help="format: --l4_protocol=udp"
    )
    parser.add_argument(
        "-t",
        "--timeout_ms",
        dest="timeout_ms",
        type=_unsigned(64),
        help="format: --timeout_ms=2000",
    )
    parser.add_argument(
        "-f", "--debug_file", dest="debug_file", help="format: --debug_file=./debug.pcap"
    )
    parser.add_argument(
        "-g",
        "--debug_format",
        dest="debug_format",
        default="json",
        help="format: --debug_format=json",
    )
    parser.add_argument(
        "-b",
        "--ip_bitfield",
        dest="ip_bitfield",
        type=_checked(parse_hex),
        default="0x00",
        help="format: --ip_bitfield=0x04",
    )
    parser.add_argument(
        "-r",
        "--dry_run",
        dest="dry_run",
        action="store_true",
        help="format: --dry_run",
    )
    parser.add_argument(
        "--count", dest="count", type=_unsigned(32), default=1, help=argparse.SUPPRESS
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse the command line; with no arguments, print help and exit."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    if not argv:
        parser.print_help()
        print()
        raise SystemExit(0)
    return Args(**vars(parser.parse_args(list(argv))))


def format_mac(mac: bytes) -> str:
    """Render a MAC address as a bracketed list of upper-case hex bytes."""
    return "[" + ", ".join(f"{byte:02X}" for byte in mac) + "]"


def report_lines(args: Args) -> Iterator[str]:
    """Yield the summary lines describing the requested packets."""
    src_ip = args.src_ip if args.src_ip is not None else _MISSING
    dst_ip = args.dst_ip if args.dst_ip is not None else _MISSING

    yield f"SRC IP: {src_ip}"
    yield f"DST IP: {dst_ip}"
    if args.src_mac is not None:
        yield f"SRC MAC: {format_mac(args.src_mac)}"
    else:
        yield f"SRC MAC: {_MISSING}"
    yield f"IP bitfield: 0x{args.ip_bitfield:02X}"

    port = args.dest_port if args.dest_port is not None else 0
    mac = format_mac(args.src_mac if args.src_mac is not None else bytes(6))
    for number in range(1, args.count + 1):
        yield (
            f"Packet {number}: {src_ip} -> {dst_ip}:{port}, "
            f"IP bitfield=0x{args.ip_bitfield:02X}, SRC MAC={mac}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: parse options and print the packet summary."""
    args = parse_args(argv)
    for line in report_lines(args):
        print(line)
    return 0