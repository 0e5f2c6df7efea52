"""
Configuration reading utilities.

This module provides utilities for reading JSON configuration files
shipped with columnviz. Results are cached, so every message template is
read from disk only once per process.

Methods
-------
read_config
    Read and cache JSON configuration files from the package's config directory.

Examples
--------
>>> from columnviz._utils import read_config

>>> read_config("messages")["errors"]["column_not_found_f"]
"Column '{}' does not exist in the dataset."
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=1)
def read_config(name) -> dict:
    """
    Read and cache JSON configuration files.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Notes
    -----
    - The cache size is set to 1 because columnviz currently ships a single
      configuration file (``messages.json``).
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
