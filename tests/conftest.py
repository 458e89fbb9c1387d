#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
# Filename: tests/conftest.py

import sys
import os

import pytest

# Add the 'src' directory to the Python path so that modules like
# 'id_encoder' and 'config_loader' can be imported directly by tests,
# allowing coverage.py to correctly track their execution.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def clean_codec_env(monkeypatch):
    """Removes environment overrides so tests see only the config under test."""
    for name in ("ANYBASE_PRESET", "ANYBASE_RADIX", "ANYBASE_CONFIG_OVERRIDE"):
        monkeypatch.delenv(name, raising=False)

# === End of tests/conftest.py ===
