"""
Saving of :class:`columnviz.types.VisualizationResult` objects.

:func:`columnviz.visualize` never writes anything to disk; callers that want
a file pass the returned result to :func:`save_chart`.

Examples
--------
>>> import columnviz
>>> result = columnviz.visualize({"x": [1, 2, 2, 3]}, "x", bins=3)
>>> columnviz.save_chart(result, "./plots")
PosixPath('/.../plots/histogram.png')
"""

from pathlib import Path
from typing import Optional

from columnviz.types import VisualizationResult
from ._utils import save_plot


def save_chart(result: VisualizationResult,
               directory: str | Path = ".",
               overwrite: bool = True,
               plot_name: Optional[str] = None,
               verbose: bool = False) -> Path:
    """
    Save the figure held by a visualization result.

    Parameters
    ----------
    result : VisualizationResult
        Result returned by :func:`columnviz.visualize`.
    directory : str or Path, default="."
        File path (with extension) or directory. Matplotlib figures default
        to PNG, Plotly figures to HTML.
    overwrite : bool, default=True
        If False, refuse to replace an existing file.
    plot_name : str, optional
        File name used when `directory` has no extension. Defaults to the
        chart kind (``"histogram"`` or ``"bar"``).
    verbose : bool, default=False
        If True, log the written path at INFO level.

    Returns
    -------
    Path
        Absolute path of the written file.

    Raises
    ------
    TypeError
        If `result` is not a VisualizationResult.
    ValueError
        If the file extension is unsupported by the result's engine.
    FileExistsError
        If the file exists and `overwrite` is False.
    """
    if not isinstance(result, VisualizationResult):
        raise TypeError(
            f"Expected VisualizationResult, got {type(result).__name__}."
        )
    default_name = result.kind.value if result.kind is not None else "plot"
    return save_plot(result.figure,
                     directory=directory,
                     overwrite=overwrite,
                     plot_name=plot_name if plot_name is not None else default_name,
                     verbose=verbose,
                     engine=result.engine)
