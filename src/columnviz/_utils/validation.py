"""
Data validation utilities.

This module provides functions for validating user-supplied flags, missing
values and column references before any plotting work starts.

Methods
-------
validate_string_flag(arg, supported_values, err_msg)
    Validate that a string flag is among a set of supported values.
validate_array_not_contains_nan(array, err_msg)
    Validate that a Series or DataFrame contains no ``NaN`` values.
validate_column_exists(dataset, column, err_msg)
    Validate that a column label is present in a DataFrame.

Examples
--------
>>> import columnviz._utils as utils

>>> arg = "bokeh"
>>> supported_engines = {"matplotlib", "plotly"}

>>> utils.validate_string_flag(arg,
...                            supported_values=supported_engines,
...                            err_msg=f"Unsupported engine '{arg}'.")
ValueError: Unsupported engine 'bokeh'.
"""

from typing import Hashable, Iterable

import pandas as pd

from columnviz.exceptions import ColumnNotFoundError


def validate_string_flag(
    arg: str, supported_values: Iterable[str], err_msg: str
) -> None:
    """
    Validate a string flag against a set of supported values.

    Parameters
    ----------
    arg : str
        The string flag to validate.
    supported_values : Iterable[str]
        An iterable containing all supported flag values.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `arg` is not found in `supported_values`.

    Examples
    --------
    >>> validate_string_flag(
        "A", {"A", "B", "C"}, "Method 'A' not in supported methods")
    >>> validate_string_flag(
        "D", {"A", "B", "C"}, "Method 'D' not in supported methods")
    Traceback (most recent call last):
        ...
    ValueError: Method 'D' not in supported methods
    """
    if arg not in supported_values:
        raise ValueError(err_msg)


def validate_array_not_contains_nan(
    array: pd.Series | pd.DataFrame, err_msg: str
) -> None:
    """
    Validate that a Series or DataFrame does not contain NaN values.

    Parameters
    ----------
    array : pandas.Series or pandas.DataFrame
        Data to validate.
    err_msg : str
        Error message used in the raised ``ValueError`` if validation
        fails.

    Raises
    ------
    ValueError
        If the array contains at least one missing value.

    Examples
    --------
    >>> import pandas as pd
    >>> validate_array_not_contains_nan(
            pd.Series([1, None, 3]), "Array must not contain NaN")
    Traceback (most recent call last):
        ...
    ValueError: Array must not contain NaN
    """
    if array.isna().values.any():
        raise ValueError(err_msg)


def validate_column_exists(
    dataset: pd.DataFrame, column: Hashable, err_msg: str
) -> None:
    """
    Validate that `column` is one of the DataFrame's column labels.

    Parameters
    ----------
    dataset : pandas.DataFrame
        DataFrame whose column labels are checked.
    column : Hashable
        Column label to look up.
    err_msg : str
        Error message used in the raised ``ColumnNotFoundError``.

    Raises
    ------
    ColumnNotFoundError
        If `column` is not a column of `dataset`.
    """
    try:
        found = column in dataset.columns
    except TypeError:
        # unhashable labels can never name a column
        found = False
    if not found:
        raise ColumnNotFoundError(err_msg)
