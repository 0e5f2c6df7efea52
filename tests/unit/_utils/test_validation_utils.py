import pytest
import pandas as pd
import numpy as np

from columnviz import ColumnNotFoundError
from columnviz._utils import (
    validate_string_flag, validate_array_not_contains_nan,
    validate_column_exists)


# tests for validate_string_flag

def test_validate_string_flag_positive_case():
    validate_string_flag(arg="A", supported_values=["A", "B", "C"],
                         err_msg="my_error_message")

def test_validate_string_flag_negative_case():
    with pytest.raises(ValueError, match="my_error_message"):
        validate_string_flag(arg="D", supported_values=["A", "B", "C"],
                             err_msg="my_error_message")

# tests for validate_array_not_contains_nan

def test_validate_array_not_contains_nan_positive_case():
    validate_array_not_contains_nan(pd.Series([1, 2, 3, 4, 5]),
                                    err_msg="my_error_message")

@pytest.mark.parametrize("array", [
    pd.Series([1, 2, np.nan, 4, 5]),
    pd.Series(["a", None]),
    pd.Series([1, pd.NA], dtype="Int64"),
    pd.DataFrame({"a": [1, 2], "b": [3, None]}),
])
def test_validate_array_not_contains_nan_negative_case(array):
    with pytest.raises(ValueError, match="my_error_message"):
        validate_array_not_contains_nan(array, err_msg="my_error_message")

# tests for validate_column_exists

def test_validate_column_exists_positive_case():
    df = pd.DataFrame({"a": [1], 0: [2]})
    validate_column_exists(df, "a", err_msg="my_error_message")
    validate_column_exists(df, 0, err_msg="my_error_message")

@pytest.mark.parametrize("column", ["b", "A", 1, None, ["a"]])
def test_validate_column_exists_negative_case(column):
    df = pd.DataFrame({"a": [1], 0: [2]})
    with pytest.raises(ColumnNotFoundError, match="my_error_message"):
        validate_column_exists(df, column, err_msg="my_error_message")
