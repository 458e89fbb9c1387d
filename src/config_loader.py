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
# Filename: src/config_loader.py

"""
Configuration Loader (config_loader.py)

Loads the settings used by the command-line tools of the project.

Key Features:
-   **Loads `config.ini`**: Parses the configuration file into a global
    `APP_CONFIG` object, found relative to the project root. The
    `ANYBASE_CONFIG_OVERRIDE` environment variable can point to another file.
-   **Loads `.env`**: Loads environment variables (e.g. `ANYBASE_PRESET`,
    `ANYBASE_RADIX`) from a `.env` file at the project root.
-   **Safe Value Retrieval**: `get_config_value()` provides typed access to
    config values, with fallbacks, type conversion (str, int, float, bool),
    and stripping of inline comments.
-   **Codec Selection**: `get_codec_settings()` resolves the default alphabet
    preset or radix, letting environment variables win over `config.ini`.

Global Objects Provided:
-   `PROJECT_ROOT`: An absolute path to the project's root directory.
-   `APP_CONFIG`: A `configparser.ConfigParser` instance holding all data from
    `config.ini`.
-   `ENV_LOADED`: A boolean indicating if a `.env` file was successfully loaded.

Usage by other scripts:
    from config_loader import APP_CONFIG, get_config_value, get_codec_settings

    settings = get_codec_settings(APP_CONFIG)
    level = get_config_value(APP_CONFIG, 'Logging', 'level', fallback='INFO')
"""

import configparser
import os
import logging
import pathlib
from dotenv import load_dotenv

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"
DEFAULT_RADIX = 36

# Setup a basic logger for this module if not already configured by the calling script
logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

def get_project_root() -> str:
    """
    Determines the project root by searching upwards for pyproject.toml.

    Falls back to the current working directory when the module is installed
    outside a source checkout.
    """
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return os.getcwd()

PROJECT_ROOT = get_project_root()

def load_app_config():
    config = configparser.ConfigParser()

    override_path = os.getenv('ANYBASE_CONFIG_OVERRIDE')
    if override_path and os.path.exists(override_path):
        config_path = override_path
        logger.debug(f"Using override config from env var: {config_path}")
    else:
        config_path = os.path.join(PROJECT_ROOT, CONFIG_FILENAME)

    if os.path.exists(config_path):
        try:
            # 'utf-8-sig' handles files saved with a BOM.
            config.read(config_path, encoding='utf-8-sig')
            logger.debug(f"Successfully loaded configuration from: {config_path}")
        except configparser.Error as e:
            logger.error(f"Error parsing configuration file {config_path}: {e}")
    else:
        logger.debug(f"{CONFIG_FILENAME} not found at: {config_path}. Using fallbacks.")

    return config

def load_env_vars():
    """Loads environment variables from .env file located at the project root."""
    dotenv_path = os.path.join(PROJECT_ROOT, DOTENV_FILENAME)
    if os.path.exists(dotenv_path):
        if load_dotenv(dotenv_path):
            logger.debug(f"Successfully loaded .env file from: {dotenv_path}")
            return True
        else:
            logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
            return False
    return False

def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str, fallback_key=None):
    """
    Helper to get a typed value from a configparser.ConfigParser object,
    with a fallback, type conversion, and stripping of common inline comments.
    Tries the primary 'key' first, then the 'fallback_key' if provided.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The primary key name in the section.
        fallback: The value to return if no key is found or conversion fails.
        value_type (type): The expected type (str, int, float, bool).
        fallback_key (str, optional): An alternative key to try if the primary key is not found.

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_section(section):
        return fallback

    keys_to_try = [key]
    if fallback_key:
        keys_to_try.append(fallback_key)

    raw_value = None
    found_key = None
    for k in keys_to_try:
        if config.has_option(section, k):
            raw_value = config.get(section, k)
            found_key = k
            break

    if raw_value is None:
        return fallback

    # Strip inline comments like "value # comment" or "value ; comment"
    cleaned_value = raw_value
    for comment_char in [';', '#']:
        if comment_char in cleaned_value:
            cleaned_value = cleaned_value.split(comment_char, 1)[0]
    cleaned_value = cleaned_value.strip()

    if value_type == str:
        if cleaned_value.lower() == 'none':
            return None
        return cleaned_value
    elif value_type in (int, float):
        try:
            return value_type(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{found_key} value '{raw_value}' "
                           f"(cleaned: '{cleaned_value}') to {value_type.__name__}. Using fallback: {fallback}")
            return fallback
    elif value_type == bool:
        # Same spellings as configparser.getboolean (true/false, yes/no, on/off, 1/0)
        lowered = cleaned_value.lower()
        if lowered in configparser.ConfigParser.BOOLEAN_STATES:
            return configparser.ConfigParser.BOOLEAN_STATES[lowered]
        logger.warning(f"Config: Error converting [{section}]/{found_key} value '{raw_value}' "
                       f"to bool. Using fallback: {fallback}")
        return fallback
    else:
        logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
        return fallback

def get_codec_settings(config: configparser.ConfigParser) -> dict:
    """
    Resolves the default codec selection.

    The `ANYBASE_PRESET` and `ANYBASE_RADIX` environment variables take
    precedence over `[Codec] preset` and `[Codec] radix`. A preset, when
    given, wins over a radix.

    Returns:
        dict: {'preset': str or None, 'radix': int}
    """
    preset = os.getenv('ANYBASE_PRESET') or get_config_value(config, 'Codec', 'preset')
    radix = get_config_value(config, 'Codec', 'radix', fallback=DEFAULT_RADIX, value_type=int)

    env_radix = os.getenv('ANYBASE_RADIX')
    if env_radix:
        try:
            radix = int(env_radix)
        except ValueError:
            logger.warning(f"Ignoring ANYBASE_RADIX='{env_radix}': not an integer. Using {radix}.")

    return {'preset': preset or None, 'radix': radix}

# Global config object, loaded once
APP_CONFIG = load_app_config()
ENV_LOADED = load_env_vars()

# === End of src/config_loader.py ===
