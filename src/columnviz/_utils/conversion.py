"""
Conversion utilities for input standardization.

This module converts user-supplied datasets into pandas structures so the
rest of the package can rely on a single tabular representation.

Methods
-------
convert_dataframe(data)
    Convert a DataFrame or a mapping of column names to values into a
    pandas DataFrame.

Notes
-----
- DataFrames are returned as-is; callers must not mutate the result
- Mappings are shallow-copied before conversion

Examples
--------
>>> from columnviz._utils import convert_dataframe

>>> convert_dataframe({"size": [1, 2], "color": ["red", "blue"]})
   size color
0     1   red
1     2  blue
"""

from typing import Any, Mapping, Sequence, Union

import pandas as pd

from .readers import read_config

ERR_MSG_DATASET_IS_NONE = read_config("messages")["errors"]["dataset_is_none"]


def convert_dataframe(
    data: Union[pd.DataFrame, Mapping[Any, Sequence[Any]]]
) -> pd.DataFrame:
    """
    Convert an input dataset to a pandas DataFrame.

    If the input is a pandas DataFrame, it is returned as-is.
    If the input is a mapping (e.g., dict of lists or dict of Series), it is
    converted directly to a DataFrame, each key becoming a column.

    Parameters
    ----------
    data : pandas.DataFrame or Mapping
        The dataset to convert.

    Returns
    -------
    pandas.DataFrame
        Converted data as a pandas DataFrame.

    Raises
    ------
    TypeError
        If `data` is None or is neither a DataFrame nor a mapping.
    ValueError
        If the mapping values have different lengths (raised by pandas).
    """
    if data is None:
        raise TypeError(ERR_MSG_DATASET_IS_NONE)
    if isinstance(data, pd.DataFrame):
        return data
    if isinstance(data, Mapping):
        return pd.DataFrame(dict(data))
    raise TypeError(
        f"'dataset' must be a DataFrame or a mapping of column names to values, "
        f"got {type(data).__name__}."
    )
