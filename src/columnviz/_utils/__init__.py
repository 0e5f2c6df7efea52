"""
Internal utilities for columnviz.

This module provides low-level utilities for data conversion, validation,
and common package operations. These are internal APIs and may change
without notice.

Methods
-------
convert_dataframe(data)
    Convert a DataFrame or a mapping of columns to a pandas DataFrame.
validate_array_not_contains_nan(array, err_msg)
    Validate that a Series or DataFrame does not contain NaN values.
validate_column_exists(dataset, column, err_msg)
    Validate that a column label is present in a DataFrame.
validate_string_flag(arg, supported_values, err_msg)
    Validate a string flag against a set of supported values.
handle_nan(data, nan_policy, supported_policy, data_name)
    Handles NaN values in a dataset according to a specified policy.
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
read_config(name)
    Read and cache JSON configuration files.

Notes
-----
- These utilities are for internal package use only
- Use public APIs from main modules for stable functionality
"""

from .conversion import convert_dataframe
from .helpers import handle_nan, temp_log_level
from .readers import read_config
from .validation import (
    validate_array_not_contains_nan,
    validate_column_exists,
    validate_string_flag,
)

__all__ = [
    "convert_dataframe",
    "validate_array_not_contains_nan",
    "validate_column_exists",
    "validate_string_flag",
    "handle_nan",
    "temp_log_level",
    "read_config",
]
