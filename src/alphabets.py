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
# Filename: src/alphabets.py

"""
Preset alphabets for the radix codec.

Each preset is a plain string: the symbol at position `d` denotes digit value
`d`, and the length of the string is the base. Notes on typical use:

-   **BASE32_HEX**: in the spirit of ordinary hex numbers, with 32 digits.
-   **BASE32**: letters A-Z for the low digits, 2-7 for the high ones.
-   **BASE36**: safe for file names on case-insensitive filesystems. A 128-bit
    value (MD5, UUID) needs about 25 characters.
-   **BASE52**: letters only, so it fits XML `NCName` values (IDs, element
    and attribute names).
-   **BASE58**: the Bitcoin alphabet, which avoids 0, O, I and l.
-   **BASE85**: characters usually allowed in case-sensitive file names.
-   **BASE91**: all printable ASCII except dash, backslash and apostrophe.
-   **BASE94**: all printable ASCII except whitespace.
-   **BASE98**: BASE94 plus space, tab, newline and carriage return.
-   **WHITESPACE**: nothing but whitespace. Mostly a curiosity.
"""

import logging

logger = logging.getLogger(__name__)

WHITESPACE = (" \t\n\r\u000B\u0085\u00A0\u2000\u2001\u2002\u2004"
              "\u2005\u2006\u2007\u2008\u2009\u200A")
BASE32_HEX = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
BASE32 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE52 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE85 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!#$%&()*+-;<=>?@^_`{|}~"
Z85 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"
BASE91 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!#$%&()*+,./:;<=>?@[]^_`{|}~\""
BASE94 = BASE91 + "-\\'"
BASE98 = BASE94 + " \t\n\r"

PRESETS = {
    "whitespace": WHITESPACE,
    "base32hex": BASE32_HEX,
    "base32": BASE32,
    "base36": BASE36,
    "base52": BASE52,
    "base58": BASE58,
    "base62": BASE62,
    "base64": BASE64,
    "base85": BASE85,
    "z85": Z85,
    "base91": BASE91,
    "base94": BASE94,
    "base98": BASE98,
}

# Checked in order by find_alphabet(); the first one long enough wins.
RADIX_CANDIDATES = (BASE32_HEX, BASE36, BASE52, BASE62, BASE64, BASE85, BASE91, BASE94)


def find_alphabet(radix: int) -> str:
    """
    Returns the best-fit preset alphabet for a radix.

    The first candidate in `RADIX_CANDIDATES` with at least `radix` symbols is
    truncated to exactly `radix` symbols. If no candidate is large enough, the
    full BASE94 alphabet is returned instead.
    """
    for candidate in RADIX_CANDIDATES:
        if len(candidate) >= radix:
            return candidate[:radix]
    logger.warning(f"No preset alphabet has {radix} symbols. Falling back to BASE94 ({len(BASE94)} symbols).")
    return BASE94


def get_alphabet(name: str) -> str:
    """Looks up a preset alphabet by its case-insensitive name."""
    key = name.strip().lower().replace("_", "").replace("-", "")
    if key not in PRESETS:
        raise ValueError(f"Unknown alphabet preset '{name}'. Valid presets: {', '.join(PRESETS)}")
    return PRESETS[key]

# === End of src/alphabets.py ===
