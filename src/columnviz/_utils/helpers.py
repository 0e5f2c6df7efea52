"""
General-purpose helpers.

This module contains NaN value handling and logging utilities shared by
the plotting code.

Methods
-------
handle_nan(data, nan_policy, supported_policy, data_name)
    Handles NaN values in a Series or DataFrame according to a specified policy.
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.

Examples
--------
>>> from columnviz._utils import helpers
>>> import pandas as pd

>>> data = pd.Series([1.0, None, 3.0, None])
>>> helpers.handle_nan(data, nan_policy='drop')
0    1.0
2    3.0
dtype: float64
"""

from contextlib import contextmanager
from typing import Iterable, Literal

import pandas as pd

from .readers import read_config
from .validation import validate_array_not_contains_nan, validate_string_flag


def handle_nan(
    data: pd.Series | pd.DataFrame,
    nan_policy: Literal["drop", "raise", "include"],
    supported_policy: Iterable[str] = ("drop", "raise", "include"),
    data_name: str = "data",
):
    """
    Handles NaN values in a Series or DataFrame according to a specified policy.

    Parameters
    ----------
    data : pd.Series or pd.DataFrame
        Input data to process. It is never modified in place.
    nan_policy : {'drop', 'raise', 'include'}
        Policy for handling NaN values:
        - 'drop': drop rows with NaNs.
        - 'raise': raise ValueError if NaNs are present.
        - 'include': treat NaNs as valid values (do nothing).
    supported_policy : Iterable[str], default=('drop', 'raise', 'include')
        nan_policy values that are allowed in the current context.
        If `nan_policy` is not in this set, a ValueError is raised.
    data_name : str, default='data'
        Name of the dataset (used in error messages).

    Returns
    -------
    pd.Series or pd.DataFrame
        Copy of the data with NaNs handled according to the policy.

    Raises
    ------
    ValueError
        If `nan_policy` is 'raise' and NaNs are present in the data.
        If `nan_policy` not in `supported_policy`.
    """
    error_messages = read_config("messages")["errors"]
    validate_string_flag(
        nan_policy,
        supported_policy,
        err_msg=error_messages["unsupported_method_f"].format(
            nan_policy, tuple(supported_policy)
        ),
    )
    result = data.copy()
    if nan_policy == "drop":
        result = result.dropna(axis=0)
    elif nan_policy == "raise":
        # will raise ValueError if necessary
        validate_array_not_contains_nan(
            result, err_msg=error_messages["array_contains_nans_f"].format(data_name)
        )
    # 'include' -> do nothing
    return result


@contextmanager
def temp_log_level(logger, level):
    """
    Temporarily sets the logging level of a logger within a context.

    Parameters
    ----------
    logger : logging.Logger
        The logger whose level will be temporarily changed.
    level : int
        The logging level to set (e.g., logging.INFO, logging.DEBUG).

    Usage
    -----
    >>> import logging
    >>> logger = logging.getLogger("my_logger")
    >>> with temp_log_level(logger, logging.INFO):
    ...     logger.info("This will be shown if logger level was lower before")
    ...
    # After the context, logger level is restored to its original value.
    """
    old_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(old_level)
