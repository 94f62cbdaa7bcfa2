"""
config_loader.py
Configuration loading utilities.

This module provides a lightweight TOML configuration loader for the
footprint generator. The configuration file is optional: without it the
generator reads the catalogs and template bundled in ``fovgen/data`` and
writes into the working directory.

This is intentionally not a strict schema validator; missing sections and
keys are filled with defaults so that partial configuration files work.
"""
import copy
import os
from pathlib import Path

import tomli

from fovgen.errors import ParseError

DEFAULT_CONFIG_PATH = 'config/config.toml'

DATA_DIR = Path(__file__).resolve().parent / 'data'

DEFAULTS = {
    'resources': {
        'cameras': str(DATA_DIR / 'cameras.csv'),
        'optics': str(DATA_DIR / 'optics.csv'),
        'template': str(DATA_DIR / 'footprint.xml'),
    },
    'output': {
        'directory': '.',
        'first_pair_only': False,
    },
    'logging': {
        'level': 'WARNING',
    },
}


def default_config():
    """Return a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULTS)


def load_config(path=DEFAULT_CONFIG_PATH):
    """
    Load the generator configuration from a TOML file.

    The configuration is parsed into a plain Python dictionary and merged
    over the defaults, section by section. A missing file is not an error.

    Default sections:

    resources:
        - cameras (str): Camera catalog CSV
        - optics (str): Optics catalog CSV
        - template (str): Footprint VOTable template

    output:
        - directory (str): Where .vot files are written
        - first_pair_only (bool): Stop after the first camera/optic pairing

    logging:
        - level (str): Root logger level name

    Args:
        path (str): Path to the TOML configuration file.

    Returns:
        dict: Configuration dictionary with defaults applied.

    Raises:
        ParseError: the file exists but is not valid TOML.
    """
    cfg = default_config()
    if not os.path.exists(path):
        return cfg

    with open(path, 'rb') as f:
        try:
            user_cfg = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ParseError(f"{path}: {e}") from e

    for section, values in user_cfg.items():
        if isinstance(values, dict) and section in cfg:
            cfg[section].update(values)
        else:
            cfg[section] = values
    return cfg
