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
# Filename: src/id_encoder.py

"""
Encodes integers, UUIDs and short byte sequences against an arbitrary alphabet.

The `RadixCodec` treats its input as a single binary number and writes it as
a digit string over the alphabet it was built with, most significant digit
first. It is intended for short values (up to a few dozen bytes) such as
IPv6 addresses, UUIDs and SHA/MD5 hashes, where the goal is a compact,
filesystem- or protocol-safe text form. It does not insert any padding,
length markers or separators; use an ordinary Base64 encoding for long
binaries.

UUIDs are stored with a bias of 2**127 added to their signed 128-bit value,
so the encoded form is always unsigned.

Usage:
    from id_encoder import RadixCodec, BASE36_CODEC

    codec = RadixCodec(36)
    text = codec.encode_identifier(uuid.uuid4())
    original = codec.decode_identifier(text)

This module is not intended to be run directly but is imported by other scripts.
"""

import logging
import uuid

import alphabets

logger = logging.getLogger(__name__)

IDENTIFIER_BYTES = 16
IDENTIFIER_BIAS = 1 << 127


class InvalidSymbolError(ValueError):
    """Raised when a digit string contains a symbol that is not in the alphabet."""


class DegenerateAlphabetError(ValueError):
    """Raised when a codec is built from fewer than two symbols."""


class RadixCodec:
    """Bidirectional mapping between binary values and digit strings."""

    def __init__(self, alphabet):
        if isinstance(alphabet, bool):
            raise ValueError("Alphabet must be a string, a sequence of symbols, or an integer radix.")
        if isinstance(alphabet, int):
            if alphabet < 2:
                raise DegenerateAlphabetError(f"Radix must be at least 2, got {alphabet}.")
            radix = alphabet
            alphabet = alphabets.find_alphabet(radix)
            logger.debug(f"Radix {radix} selected alphabet {alphabet!r}")
        symbols = "".join(alphabet)
        if len(symbols) != len(alphabet):
            raise ValueError("Alphabet symbols must be single characters.")
        if len(symbols) < 2:
            raise DegenerateAlphabetError(
                f"Alphabet must contain at least 2 symbols, got {len(symbols)}.")

        self._alphabet = symbols
        self._base = len(symbols)
        # First occurrence of a repeated symbol wins.
        self._digits = {symbol: value for value, symbol in reversed(list(enumerate(symbols)))}

    @classmethod
    def from_radix(cls, radix: int) -> "RadixCodec":
        """Builds a codec over the best-fit preset alphabet for `radix`."""
        if not isinstance(radix, int) or isinstance(radix, bool):
            raise ValueError("Radix must be an integer.")
        return cls(radix)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def base(self) -> int:
        return self._base

    def __repr__(self):
        return f"RadixCodec(base={self._base}, alphabet={self._alphabet!r})"

    def __eq__(self, other):
        if not isinstance(other, RadixCodec):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self):
        return hash(self._alphabet)

    # --- Integers ---

    def encode_integer(self, value: int) -> str:
        """Encodes a signed integer, prefixing a '-' when it is negative."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("Input must be an integer.")
        if value < 0 and "-" in self._digits:
            raise ValueError(
                "Cannot encode a negative integer: '-' is a digit of this alphabet, so the sign would be ambiguous.")

        num = abs(value)
        digits = []
        while True:
            num, remainder = divmod(num, self._base)
            digits.append(self._alphabet[remainder])
            if num == 0:
                break
        if value < 0:
            digits.append("-")
        return "".join(reversed(digits))

    def decode_integer(self, text: str) -> int:
        """
        Decodes a digit string, with an optional leading '+' or '-', into an integer.

        A leading '+' or '-' is only read as a sign if the alphabet does not
        itself contain that symbol.

        Raises:
            InvalidSymbolError: If a character is not part of the alphabet.
            ValueError: If the string holds no digits.
        """
        negative = False
        digits = text
        if digits and digits[0] in "+-" and digits[0] not in self._digits:
            negative = digits[0] == "-"
            digits = digits[1:]
        if not digits:
            raise ValueError(f"Digit string {text!r} contains no digits.")

        num = 0
        for position, symbol in enumerate(digits):
            try:
                digit = self._digits[symbol]
            except KeyError:
                raise InvalidSymbolError(
                    f"Symbol {symbol!r} at position {position} is not in the alphabet.") from None
            num = num * self._base + digit
        return -num if negative else num

    def _decode_unsigned(self, text: str) -> int:
        if text[:1] in ("-", "+") and text[:1] not in self._digits:
            raise ValueError(f"Digit string {text!r} must not carry a sign.")
        return self.decode_integer(text)

    # --- 128-bit identifiers ---

    def encode_identifier(self, identifier) -> str:
        """
        Encodes a UUID (or its canonical string form) as an unsigned digit string.

        The 16 bytes of the GUID layout (`UUID.bytes_le`) are read as a signed
        big-endian 128-bit integer and shifted by 2**127 into [0, 2**128).
        """
        if isinstance(identifier, str):
            identifier = uuid.UUID(identifier)
        if not isinstance(identifier, uuid.UUID):
            raise ValueError("Input must be a uuid.UUID or its string form.")
        value = int.from_bytes(identifier.bytes_le, "big", signed=True)
        return self.encode_integer(value + IDENTIFIER_BIAS)

    def decode_identifier(self, text: str) -> uuid.UUID:
        """Reverses `encode_identifier`."""
        value = self._decode_unsigned(text) - IDENTIFIER_BIAS
        try:
            raw = value.to_bytes(IDENTIFIER_BYTES, "big", signed=True)
        except OverflowError:
            raise ValueError(f"Digit string {text!r} does not denote a 128-bit identifier.") from None
        return uuid.UUID(bytes_le=raw)

    # --- Byte sequences ---

    def encode_bytes(self, data: bytes) -> str:
        """Encodes a byte sequence whose first byte is the least significant one."""
        return self.encode_integer(int.from_bytes(bytes(data), "little"))

    def decode_bytes(self, text: str, length: int = None) -> bytes:
        """
        Decodes a digit string produced by `encode_bytes`.

        Trailing zero bytes of the original input are not recoverable from the
        digits alone; pass `length` to restore a fixed-size value.
        """
        value = self._decode_unsigned(text)
        if length is None:
            length = max(1, (value.bit_length() + 7) // 8)
        try:
            return value.to_bytes(length, "little")
        except OverflowError:
            raise ValueError(f"Digit string {text!r} does not fit in {length} bytes.") from None


BASE32_HEX_CODEC = RadixCodec(alphabets.BASE32_HEX)
BASE32_CODEC = RadixCodec(alphabets.BASE32)
BASE36_CODEC = RadixCodec(alphabets.BASE36)
BASE52_CODEC = RadixCodec(alphabets.BASE52)
BASE58_CODEC = RadixCodec(alphabets.BASE58)
BASE62_CODEC = RadixCodec(alphabets.BASE62)
BASE64_CODEC = RadixCodec(alphabets.BASE64)
BASE85_CODEC = RadixCodec(alphabets.BASE85)
BASE91_CODEC = RadixCodec(alphabets.BASE91)
BASE94_CODEC = RadixCodec(alphabets.BASE94)
BASE98_CODEC = RadixCodec(alphabets.BASE98)


def to_base58(num: int) -> str:
    """Encodes a positive integer into a Base58 string."""
    if not isinstance(num, int) or num < 0:
        raise ValueError("Input must be a non-negative integer.")
    return BASE58_CODEC.encode_integer(num)


def from_base58(encoded_str: str) -> int:
    """Decodes a Base58 string back into an integer."""
    return BASE58_CODEC._decode_unsigned(encoded_str)

# === End of src/id_encoder.py ===
