#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# AnyBase Radix Codec
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/anybase_cli.py

"""
Command-Line Front End for the Radix Codec.

Encodes and decodes integers, UUIDs and hex-given byte sequences with any
alphabet. Results are printed to standard output with no decoration, so the
tool can be called from shell scripts; errors go to standard error.

The codec is chosen, in order of precedence, by `--alphabet`, `--preset`,
`--radix`, and finally by the `[Codec]` section of `config.ini` (or the
`ANYBASE_PRESET` / `ANYBASE_RADIX` environment variables).

Examples:
    anybase encode-uuid eab02684-03a7-4d99-bd10-edd7bf2445ae
    anybase --preset base62 encode-int -- -42
    anybase --radix 16 decode-bytes FF01 --length 4
    anybase minmax --bits 64 32

The `minmax` report prints the signed and unsigned boundary values of each
bit width next to their encoded form and its length, which is handy for
picking an alphabet that keeps identifiers below a field length limit.
"""

import argparse
import logging
import sys
import uuid

from colorama import Fore, init

import alphabets
from config_loader import APP_CONFIG, get_codec_settings, get_config_value
from id_encoder import RadixCodec

# Initialize colorama
init(autoreset=True, strip=False)

DEFAULT_BITS = [128, 64, 32, 16, 8]


def build_codec(args) -> RadixCodec:
    """Creates the codec selected by the command-line options or the config."""
    if args.alphabet:
        return RadixCodec(args.alphabet)
    if args.preset:
        return RadixCodec(alphabets.get_alphabet(args.preset))
    if args.radix is not None:
        return RadixCodec.from_radix(args.radix)

    settings = get_codec_settings(APP_CONFIG)
    if settings['preset']:
        return RadixCodec(alphabets.get_alphabet(settings['preset']))
    return RadixCodec.from_radix(settings['radix'])


def print_int(codec: RadixCodec, name: str, value: int):
    """Prints one boundary value with its encoding and decoding."""
    encoded = codec.encode_integer(value)
    decoded = codec.decode_integer(encoded)
    print(f"{name}(16): {value:X}")
    print(f"{name}(10): {value}")
    print(f"enc {name}({codec.base}): {encoded}")
    print(f"Encoded version takes {len(encoded)} chars.")
    status = f"{Fore.GREEN}OK" if decoded == value else f"{Fore.RED}MISMATCH"
    print(f"dec {name}(10): {decoded} {status}{Fore.RESET}")


def run_minmax(codec: RadixCodec, bits_list) -> int:
    for num_bits in bits_list:
        if num_bits < 1:
            raise ValueError(f"Bit width must be positive, got {num_bits}.")
        minimum = -(1 << (num_bits - 1))
        maximum = -minimum - 1
        umax = (1 << num_bits) - 1

        print(f"\n{Fore.CYAN}--- {num_bits}-bit boundaries (base {codec.base}) ---{Fore.RESET}")
        print_int(codec, f"min{num_bits}", minimum)
        print_int(codec, f"max{num_bits}", maximum)
        print_int(codec, f"umax{num_bits}", umax)
    return 0


def run_command(codec: RadixCodec, args) -> int:
    if args.command == "encode-int":
        print(codec.encode_integer(int(args.value, 0)))
    elif args.command == "decode-int":
        print(codec.decode_integer(args.text))
    elif args.command == "encode-uuid":
        identifier = uuid.UUID(args.uuid) if args.uuid else uuid.uuid4()
        logging.info(f"UUID: {identifier}")
        print(codec.encode_identifier(identifier))
    elif args.command == "decode-uuid":
        print(codec.decode_identifier(args.text))
    elif args.command == "encode-bytes":
        print(codec.encode_bytes(bytes.fromhex(args.hex)))
    elif args.command == "decode-bytes":
        print(codec.decode_bytes(args.text, length=args.length).hex().upper())
    elif args.command == "minmax":
        return run_minmax(codec, args.bits or DEFAULT_BITS)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode and decode integers, UUIDs and byte sequences with any alphabet.")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--alphabet", type=str, help="An explicit alphabet; its length is the base.")
    selection.add_argument("--preset", type=str,
                           help=f"A named preset alphabet ({', '.join(alphabets.PRESETS)}).")
    selection.add_argument("--radix", type=int, help="A radix; the best-fit preset is truncated to it.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("encode-int", help="Encode a signed integer (decimal, or 0x/0o/0b prefixed).")
    p.add_argument("value", type=str)
    p = subparsers.add_parser("decode-int", help="Decode a digit string into an integer.")
    p.add_argument("text", type=str)
    p = subparsers.add_parser("encode-uuid", help="Encode a UUID (a random one if omitted).")
    p.add_argument("uuid", type=str, nargs="?")
    p = subparsers.add_parser("decode-uuid", help="Decode a digit string into a UUID.")
    p.add_argument("text", type=str)
    p = subparsers.add_parser("encode-bytes", help="Encode a hex byte sequence (first byte least significant).")
    p.add_argument("hex", type=str)
    p = subparsers.add_parser("decode-bytes", help="Decode a digit string into a hex byte sequence.")
    p.add_argument("text", type=str)
    p.add_argument("--length", type=int, default=None, help="Number of bytes to produce.")
    p = subparsers.add_parser("minmax", help="Show the encoding of signed/unsigned boundary values.")
    p.add_argument("--bits", type=int, nargs="+", help=f"Bit widths to report (default: {DEFAULT_BITS}).")
    return parser


def main(argv=None):
    """Parses the command line, runs one codec operation, and returns an exit code."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.getLevelName(
        str(get_config_value(APP_CONFIG, 'Logging', 'level', fallback='WARNING')).upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logging.basicConfig(level=log_level, format=f"{Fore.YELLOW}%(levelname)s:{Fore.RESET} %(message)s")

    try:
        codec = build_codec(args)
        logging.debug(f"Using {codec!r}")
        return run_command(codec, args)
    except ValueError as e:
        print(f"{Fore.RED}ERROR: {e}{Fore.RESET}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

# === End of src/anybase_cli.py ===
