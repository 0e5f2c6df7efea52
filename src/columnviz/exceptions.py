"""Exceptions raised by columnviz."""


class ColumnNotFoundError(ValueError):
    """
    Raised when a column reference is not among the dataset's column names.

    Subclasses ``ValueError``, so callers that already guard plotting calls
    with ``except ValueError`` keep working.

    Examples
    --------
    >>> import columnviz
    >>> columnviz.visualize({"a": [1, 2, 3]}, "b")
    Traceback (most recent call last):
        ...
    columnviz.exceptions.ColumnNotFoundError: Column 'b' does not exist in the dataset.
    """
