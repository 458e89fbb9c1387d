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
# Filename: tests/test_anybase_cli.py

"""
Unit tests for src/anybase_cli.py.
"""
import uuid
from configparser import ConfigParser
from unittest.mock import patch

import pytest

from anybase_cli import main

SAMPLE_UUID = "eab02684-03a7-4d99-bd10-edd7bf2445ae"
SAMPLE_ENCODED = "8UI1ZQ4M3YRMM73T73EQFGZ2"


@pytest.fixture
def codec_config(mocker):
    """Replaces the loaded config.ini with an in-memory one."""
    def _apply(content):
        config = ConfigParser()
        config.read_string(content)
        mocker.patch('anybase_cli.APP_CONFIG', config)
        return config
    return _apply


def run(argv, capsys):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err


def test_encode_uuid_with_radix(capsys):
    code, out, _ = run(["--radix", "36", "encode-uuid", SAMPLE_UUID], capsys)
    assert code == 0
    assert out == SAMPLE_ENCODED


def test_decode_uuid_with_preset(capsys):
    code, out, _ = run(["--preset", "base36", "decode-uuid", SAMPLE_ENCODED], capsys)
    assert code == 0
    assert out == SAMPLE_UUID


def test_encode_random_uuid_round_trips(capsys):
    code, encoded, _ = run(["--preset", "base62", "encode-uuid"], capsys)
    assert code == 0
    code, decoded, _ = run(["--preset", "base62", "decode-uuid", encoded], capsys)
    assert code == 0
    assert uuid.UUID(decoded)


@pytest.mark.parametrize("argv, expected", [
    (["--alphabet", "01", "encode-int", "5"], "101"),
    (["--radix", "16", "encode-int", "0xff"], "FF"),
    (["--radix", "36", "encode-int", "-255"], "-73"),
    (["--radix", "36", "decode-int", "-73"], "-255"),
    (["--preset", "base58", "decode-int", "BukQL"], "123456789"),
    (["--radix", "16", "encode-bytes", "FF01"], "1FF"),
    (["--radix", "16", "decode-bytes", "1FF", "--length", "3"], "FF0100"),
])
def test_codec_commands(argv, expected, capsys):
    code, out, _ = run(argv, capsys)
    assert code == 0
    assert out == expected


def test_minmax_report(capsys):
    code, out, _ = run(["--radix", "36", "minmax", "--bits", "64"], capsys)
    assert code == 0
    assert "64-bit boundaries (base 36)" in out
    assert "enc max64(36): 1Y2P0IJ32E8E7" in out
    assert "enc min64(36): -1Y2P0IJ32E8E8" in out
    assert "Encoded version takes 13 chars." in out
    assert "MISMATCH" not in out


def test_minmax_default_bit_widths(capsys):
    code, out, _ = run(["--radix", "36", "minmax"], capsys)
    assert code == 0
    for bits in (128, 64, 32, 16, 8):
        assert f"umax{bits}(10): {(1 << bits) - 1}" in out


@pytest.mark.parametrize("argv, message", [
    (["--radix", "36", "decode-int", "12*4"], "not in the alphabet"),
    (["--radix", "36", "decode-uuid", "-1"], "must not carry a sign"),
    (["--preset", "base85", "encode-int", "-1"], "ambiguous"),
    (["--preset", "base63", "encode-int", "1"], "Unknown alphabet preset"),
    (["--alphabet", "A", "encode-int", "1"], "at least 2 symbols"),
    (["--radix", "36", "encode-bytes", "not-hex"], "non-hexadecimal"),
    (["--radix", "36", "minmax", "--bits", "0"], "Bit width must be positive"),
])
def test_errors_return_exit_code_one(argv, message, capsys):
    code, _, err = run(argv, capsys)
    assert code == 1
    assert "ERROR:" in err
    assert message in err


def test_selection_options_are_mutually_exclusive():
    with pytest.raises(SystemExit) as exc_info:
        main(["--radix", "36", "--preset", "base62", "encode-int", "1"])
    assert exc_info.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


@pytest.mark.usefixtures("clean_codec_env")
def test_default_codec_comes_from_config(codec_config, capsys):
    codec_config("[Codec]\npreset = base36\n")
    code, out, _ = run(["encode-uuid", SAMPLE_UUID], capsys)
    assert code == 0
    assert out == SAMPLE_ENCODED


@pytest.mark.usefixtures("clean_codec_env")
def test_default_codec_uses_config_radix(codec_config, capsys):
    codec_config("[Codec]\npreset =\nradix = 16\n")
    code, out, _ = run(["encode-int", "255"], capsys)
    assert code == 0
    assert out == "FF"


@pytest.mark.usefixtures("clean_codec_env")
def test_env_preset_overrides_config(codec_config, monkeypatch, capsys):
    codec_config("[Codec]\nradix = 16\n")
    monkeypatch.setenv("ANYBASE_PRESET", "base58")
    code, out, _ = run(["encode-int", "58"], capsys)
    assert code == 0
    assert out == "21"


def test_script_entry_uses_sys_argv(capsys):
    with patch('sys.argv', ["anybase_cli.py", "--radix", "36", "encode-int", "36"]):
        code = main()
    assert code == 0
    assert capsys.readouterr().out.strip() == "10"

# === End of tests/test_anybase_cli.py ===
