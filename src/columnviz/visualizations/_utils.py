"""
Internal utility module for columnviz's visualizations subpackage.

This module provides the infrastructure around the column visualizer:
theme resolution for both engines, scoped Seaborn/Matplotlib styling and
figure export.

Functions
-------
resolve_theme(theme, engine)
    Map a ``ChartStyle.theme`` value to a Seaborn style or Plotly template.
temp_plot_theme(style)
    Context manager to temporarily set a Seaborn axes style.
apply_minimal_axes(ax)
    Strip axis spines and ticks marks from a Matplotlib Axes.
save_plot(fig, directory, overwrite, plot_name, verbose, engine)
    Saves a Matplotlib or Plotly figure to disk with file handling and logging.

Notes
-----
This module is strictly for internal use within columnviz. It relies on
standard Python context managers (`contextlib`) and Matplotlib/Seaborn
utilities to manage global state safely.
"""

import logging
import contextlib
from contextlib import contextmanager
from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns
from plotly.graph_objs import Figure as PxFigure

from columnviz._utils import temp_log_level, read_config, validate_string_flag
from .style import MINIMAL_THEME

logger = logging.getLogger(__name__)

SUPPORTED_ENGINES = ("matplotlib", "plotly")
MINIMAL_MPL_STYLE = "whitegrid"
MINIMAL_PLOTLY_TEMPLATE = "plotly_white"

ERR_MSG_UNSUPPORTED_ENGINE_F = read_config("messages")["errors"][
    "unsupported_engine_f"
]

SUPPORTED_FILE_FORMATS = {
    "matplotlib": {
        "png",
        "jpg",
        "jpeg",
        "svg",
        "pdf",
        "eps",
        "pgf",
        "ps",
        "raw",
        "rgba",
        "svgz",
        "tif",
        "tiff",
        "webp",
    },
    "plotly": {"html"},
}


def validate_engine(engine: str):
    """Raise ValueError unless `engine` is 'matplotlib' or 'plotly'."""
    validate_string_flag(
        engine,
        SUPPORTED_ENGINES,
        err_msg=ERR_MSG_UNSUPPORTED_ENGINE_F.format(engine, SUPPORTED_ENGINES),
    )


def resolve_theme(theme: str | None, engine: str) -> str | None:
    """
    Map a ``ChartStyle.theme`` value to an engine-specific style name.

    Parameters
    ----------
    theme : str or None
        ``"minimal"``, any Seaborn style / Plotly template name, or None.
    engine : {'matplotlib', 'plotly'}
        Target plotting engine.

    Returns
    -------
    str or None
        Seaborn style name (Matplotlib) or Plotly template name. None means
        that the engine's current defaults are kept.

    Examples
    --------
    >>> resolve_theme("minimal", "matplotlib")
    'whitegrid'
    >>> resolve_theme("minimal", "plotly")
    'plotly_white'
    >>> resolve_theme("ggplot2", "plotly")
    'ggplot2'
    """
    if theme != MINIMAL_THEME:
        return theme
    return MINIMAL_MPL_STYLE if engine == "matplotlib" else MINIMAL_PLOTLY_TEMPLATE


@contextmanager
def temp_plot_theme(style: str = None):
    """
    Temporarily set the Seaborn axes style.

    Changes are automatically reverted upon exiting the context, so figures
    created afterwards use the caller's global settings again.

    Parameters
    ----------
    style : str, optional
        Name of a valid Seaborn style context (e.g., "darkgrid", "whitegrid",
        "ticks"). Affects axis appearance, background, and gridlines.
        If None, the current style is left untouched.

    Examples
    --------
    >>> with temp_plot_theme(style="whitegrid"):
    ...     fig, ax = plt.subplots()
    ...
    >>> # Plots generated after the block revert to the previous global settings.
    """
    context = (
        sns.axes_style(style) if style is not None else contextlib.nullcontext()
    )
    with context:
        yield


def apply_minimal_axes(ax):
    """
    Remove all spines and tick marks, keeping only the grid.

    Completes the minimal look started by the ``whitegrid`` style.
    """
    sns.despine(ax=ax, left=True, bottom=True)
    ax.tick_params(length=0)


def validate_file_format(ext: str, engine: str):
    """
    Validate that a given file extension is supported by the specified engine.

    Parameters
    ----------
    ext : str
        File extension to validate (without leading dot, e.g., 'png', 'html').
    engine : str
        Plotting engine, either 'matplotlib' or 'plotly'.

    Raises
    ------
    ValueError
        If the extension is not supported for the given engine.
    """
    if ext not in SUPPORTED_FILE_FORMATS[engine]:
        supported = ", ".join(sorted(SUPPORTED_FILE_FORMATS[engine]))
        raise ValueError(
            f"Unsupported file format '{ext}' for engine '{engine}'. "
            f"Supported formats are: {supported}."
        )


def resolve_plot_path(directory: str | Path, plot_name: str, engine: str):
    """
    Resolve the absolute path and file extension for a plot file.

    If the input path does not include an extension, a default filename
    is generated based on the engine ('plot_name.html' for Plotly,
    'plot_name.png' for Matplotlib).

    Returns
    -------
    tuple[Path, str]
        - Absolute path to the file including filename.
        - File extension (without leading dot).
    """
    directory = Path(directory).absolute()
    ext = directory.suffix.lower()
    # no extension: the input is a directory path
    if ext == "":
        directory = (
            directory / f"{plot_name}.html"
            if engine == "plotly"
            else directory / f"{plot_name}.png"
        )
        ext = directory.suffix.lower()
    return directory, ext[1:]


def save_plot(
    fig: plt.Figure | PxFigure,
    directory: str | Path = ".",
    overwrite: bool = True,
    plot_name: str = "plot",
    **kwargs,
) -> Path:
    """
    Save a matplotlib or Plotly figure to disk.

    Parameters
    ----------
    fig : matplotlib.figure.Figure or plotly.graph_objs.Figure
        The figure object to save. Must match `engine`.
    directory : str or Path, default="."
        Target file path or directory for saving the figure.
        - If the path includes an extension (e.g., ".png" or ".html"), the figure is
          saved with that filename.
        - If no extension is provided, the figure is saved as
          '{plot_name}.png' (for Matplotlib) or '{plot_name}.html' (for Plotly)
          within the directory.
    overwrite : bool, default=True
        If False and the target file exists, a FileExistsError is raised.
    plot_name : str, default="plot"
        Name of the plot used for logging and for generating filenames when
        directory is a path without extension. Cannot be empty.
    verbose : bool, default=False
        If True, enables informational logging.
    engine : {'matplotlib', 'plotly'}, default="matplotlib"
        Engine that produced `fig`. Matplotlib figures are saved in static
        formats, Plotly figures as interactive HTML pages.

    Returns
    -------
    Path
        Absolute path of the written file.

    Raises
    ------
    TypeError
        If `fig` is not a matplotlib or plotly Figure object.
        If `directory` is neither a string nor a Path.
    ValueError
        If `plot_name` or `directory` is empty.
        If `engine` or the file format is unsupported.
    FileExistsError
        If the output file already exists and `overwrite` is False.

    Examples
    --------
    >>> fig, ax = plt.subplots()
    >>> ax.plot([1, 2, 3])
    >>> save_plot(fig, "./plot.png", plot_name="my_plot", verbose=True)
    """
    engine = kwargs.get("engine", "matplotlib")
    log_context = (
        temp_log_level(logger, logging.INFO)
        if kwargs.get("verbose", False)
        else contextlib.nullcontext()
    )
    validate_engine(engine)
    if not isinstance(fig, (plt.Figure, PxFigure)):
        logger.error(
            "Failed to save '%s' to %s: "
            "Expected matplotlib or plotly Figure object, got %s.",
            plot_name,
            directory,
            type(fig).__name__,
        )
        raise TypeError(
            f"Expected matplotlib or plotly Figure object, got {type(fig).__name__}."
        )
    if not isinstance(directory, (str, Path)):
        raise TypeError(
            f"Invalid type for argument 'directory'. Expected str or pathlib.Path, "
            f"but received {type(directory).__name__}."
        )
    if str(directory).strip() == "":
        err_msg = "Directory path must not be empty."
        logger.error(err_msg)
        raise ValueError(err_msg)
    if plot_name == "":
        err_msg = "The 'plot_name' cannot be empty."
        logger.error(err_msg)
        raise ValueError(err_msg)

    path, file_format = resolve_plot_path(directory, plot_name, engine)
    validate_file_format(file_format, engine)
    try:
        if not path.parent.exists():
            path.parent.mkdir(parents=True)
            logger.warning("Directory '%s' was created automatically.", path.parent)
        if path.exists() and not overwrite:
            raise FileExistsError(
                f"Attempted to save plot to existing path "
                f"without 'overwrite=True'. Path: {path}"
            )
        if engine == "matplotlib":
            fig.savefig(path)
        else:
            fig.write_html(path)
        with log_context:
            logger.info("'%s' saved to %s", plot_name, path)
    except OSError as e:
        logger.error("Failed to save '%s' to %s: %s", plot_name, path, e)
        raise
    return path
