# pktcraft

pktcraft is a small toolkit for putting network headers together by hand.
It parses MAC addresses, dotted IPv4 addresses and hex bytes, serialises TCP
and UDP headers to big-endian bytes, and computes the RFC 1071 Internet
checksum. A command-line front end reads packet parameters and prints a
summary of the packets it describes.

It has no runtime dependencies beyond the Python standard library and supports
Python 3.10 and later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Running `pktcraft` with no arguments prints the help text and exits with
status 0. Otherwise it reads the options below:

```
pktcraft --src_ip=192.168.25.2 --dst_ip=192.168.1.25 --dest_port=8080
pktcraft --src_mac=02:00:00:00:00:01 --dst_mac=02:00:00:00:00:02
pktcraft --l4_protocol=udp --timeout_ms=2000
pktcraft --debug_file=./debug.json --debug_format=json
pktcraft --ip_bitfield=0x04 --dry_run
```

| Option                 | Meaning                                        | Default |
|------------------------|------------------------------------------------|---------|
| `-s`, `--src_ip`       | source IPv4 address (text)                     |         |
| `-d`, `--dst_ip`       | destination IPv4 address (text)                |         |
| `-p`, `--dest_port`    | destination port, 0–65535                      |         |
| `-m`, `--src_mac`      | source MAC, six colon-separated hex pairs      |         |
| `-c`, `--dst_mac`      | destination MAC, six colon-separated hex pairs |         |
| `-l`, `--l4_protocol`  | layer-4 protocol name, e.g. `tcp` or `udp`     |         |
| `-t`, `--timeout_ms`   | timeout in milliseconds                        |         |
| `-f`, `--debug_file`   | path of a debug output file                    |         |
| `-g`, `--debug_format` | format of the debug output                     | `json`  |
| `-b`, `--ip_bitfield`  | one byte in hex, with or without `0x`          | `0x00`  |
| `-r`, `--dry_run`      | flag                                           | off     |
| `-V`, `--version`      | print the version and exit                     |         |

A hidden `--count` option (default 1) sets how many packet lines are printed.
A port, timeout, MAC or hex value that does not parse is reported as a usage
error.

The output is a summary followed by one line per packet:

```
$ pktcraft --src_ip=10.0.0.1 --dst_ip=10.0.0.2 --dest_port=8080 --src_mac=02:00:00:00:00:01
SRC IP: 10.0.0.1
DST IP: 10.0.0.2
SRC MAC: [02, 00, 00, 00, 00, 01]
IP bitfield: 0x00
Packet 1: 10.0.0.1 -> 10.0.0.2:8080, IP bitfield=0x00, SRC MAC=[02, 00, 00, 00, 00, 01]
```

Missing addresses are shown as `<missing>`; a missing port is shown as `0`
and a missing MAC as all zeros in the packet lines.

The same steps are available from Python: `pktcraft.cli.parse_args(argv)`
returns an `Args` dataclass, `report_lines(args)` yields the lines above,
`format_mac(mac)` renders a MAC address, `build_parser()` returns the
`argparse` parser, and `main(argv=None)` runs the whole command.

## Library

### Parsing

```python
from pktcraft.parsing import parse_mac, parse_ipv4, parse_hex
from pktcraft.errors import NotEnoughOctets

parse_mac("02:00:00:00:00:01")   # b"\x02\x00\x00\x00\x00\x01"
parse_ipv4("192.168.1.1")        # Ipv4Addr; str() gives "192.168.1.1"
parse_hex("0x1A")                # 26
parse_hex("ff")                  # 255

try:
    parse_ipv4("192.168.1")
except NotEnoughOctets:
    ...
```

Every parsing failure raises a subclass of `pktcraft.errors.ParseError`
(itself a `ValueError`): `InvalidMac`, `InvalidIpv4`, `TooManyOctets`,
`NotEnoughOctets` or `InvalidHex`.

### Packing layer-4 headers

```python
from pktcraft.headers import UdpHeader
from pktcraft.l4 import pack_udp

header = UdpHeader(
    src_port=53,
    dst_port=5555,
    length=13,
    checksum=0xBEEF,
    payload=b"hello",
)
segment = pack_udp(header)   # 8 header bytes followed by b"hello"
```

`pack_tcp` takes a `TcpHeader` in the same way. The data-offset field is
computed from the length of the options (the header's `data_offset` value is
not used), the reserved bits and the low nine flag bits are combined into one
16-bit word, and options and payload follow the 20-byte fixed header. Both
functions return `bytes`; a field too large for its width raises
`ValueTooLarge`.

### Byte helpers and checksum

```python
from pktcraft.byteutil import convert_n_to_bytes, push_bytes
from pktcraft.checksum import internet_checksum

convert_n_to_bytes(0x1234, 2)        # b"\x12\x34"
convert_n_to_bytes(0xDEADBEEF, 4)    # b"\xde\xad\xbe\xef"
internet_checksum(b"")               # 0xFFFF
internet_checksum(b"\x01")           # 0xFEFF
```

`convert_n_to_bytes` accepts sizes of 2, 4 or 8 bytes only; any other size
raises `InvalidLengthBytes`, and a value that does not fit raises
`ValueTooLarge`, which carries the offending `value` and `size`.
`push_bytes(buf, offset, data)` writes `data` into a `bytearray` at `offset`
and returns the offset just past it.

The header records `EthernetHeader`, `Ipv4Header`, `TcpHeader`, `UdpHeader`
and `Ipv4Addr` live in `pktcraft.headers`.

## What it does not do

- It does not send or capture packets; the command only prints a summary.
- `--l4_protocol`, `--timeout_ms`, `--debug_file`, `--debug_format`,
  `--dry_run` and `--dst_mac` are parsed but do not change the output, and no
  debug file (JSON or pcap) is written.
- `EthernetHeader` and `Ipv4Header` are data records only; there is no
  serialiser for Ethernet frames or IPv4 headers, and checksums are not
  filled in automatically.