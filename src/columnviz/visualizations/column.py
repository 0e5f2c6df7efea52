"""
Column-level plotting for columnviz.

This module turns a single column of a tabular dataset into a chart. Numeric
columns are binned into a histogram, categorical columns are counted into a
bar chart. Both charts share the same styling options (see
:class:`columnviz.visualizations.style.ChartStyle`) and are returned wrapped
in a :class:`columnviz.types.VisualizationResult`.

Functions
---------
visualize(dataset, column, bins = 30, fill_color = "steelblue", **options)
    Plot a histogram or a bar chart of one column, depending on its kind.
resolve_column(dataset, column)
    Return the values of a column, failing if the column does not exist.
infer_column_kind(data)
    Classify a column as numeric or categorical.

Notes
-----
- ``visualize`` only builds the figure. Rendering, displaying and saving are
  left to the caller (see :func:`columnviz.visualizations.save_chart`).
- The plotting engine's own validation is not duplicated here: an invalid
  bin count or color raises whatever error Matplotlib or Plotly raises.

Examples
--------
>>> import pandas as pd
>>> import columnviz
>>> df = pd.DataFrame({"numeric_column": [1, 2, 3, 10, 14, 14, 12, 12, 12, 8]})
>>> result = columnviz.visualize(df, "numeric_column", bins=5,
...                              fill_color="darkorchid")
>>> result.kind
<ChartKind.HISTOGRAM: 'histogram'>
>>> result.title
'Histogram of numeric_column'
>>> result.figure.show()
"""

import logging
import warnings
from numbers import Real
from typing import Any, Hashable, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import plotly.express as px
import seaborn as sns

from columnviz._utils import (convert_dataframe, handle_nan, read_config,
                              validate_column_exists)
from columnviz.exceptions import ColumnNotFoundError
from columnviz.types import ChartKind, ColumnKind, VisualizationResult
from .style import ChartStyle, MINIMAL_THEME
from ._utils import (apply_minimal_axes, resolve_theme, temp_plot_theme,
                     validate_engine)

logger = logging.getLogger(__name__)

ERR_MSG_COLUMN_NOT_FOUND_F = read_config("messages")["errors"]["column_not_found_f"]
ERR_MSG_UNSUPPORTED_KIND_F = read_config("messages")["errors"]["unsupported_kind_f"]
WRN_MSG_EMPTY_DATA_F = read_config("messages")["warns"]["ColumnVisualizer"][
    "empty_data_f"
]

DEFAULT_FILL_COLOR = "steelblue"
DEFAULT_BINS = 30
MISSING_LABEL = "NaN"

TITLE_TEMPLATES = {
    ChartKind.HISTOGRAM: "Histogram of {}",
    ChartKind.BAR: "Bar chart of {}",
}


def visualize(dataset: pd.DataFrame | Mapping[Hashable, Sequence[Any]],
              column: Hashable,
              bins: int = DEFAULT_BINS,
              fill_color: Any = DEFAULT_FILL_COLOR,
              *,
              kind: Optional[ColumnKind | str] = None,
              engine: str = "matplotlib",
              **options) -> VisualizationResult:
    """
    Plot one column of a dataset as a histogram or a bar chart.

    The column is first looked up in the dataset, then classified as numeric
    or categorical (see :func:`infer_column_kind`). Numeric columns are drawn
    as a histogram with `bins` bins, categorical columns as a bar chart with
    one bar per category, its height being the number of occurrences.
    Both charts get a black outline, an opacity of 0.7, a minimal theme and
    a title (``"Histogram of {column}"`` or ``"Bar chart of {column}"``).

    Parameters
    ----------
    dataset : pandas.DataFrame or Mapping
        Tabular data with named columns. Mappings (e.g. dict of lists) are
        converted to a DataFrame. The dataset is never modified.
    column : Hashable
        Name of the column to plot.
    bins : int, default=30
        Number of histogram bins. Ignored for categorical columns.
        Not validated here; invalid values raise the plotting engine's error.
        Plotly reads ``bins=0`` as automatic binning instead of failing, in
        which case ``extra_info['bins']`` is ``None``.
    fill_color : str or color-like, default="steelblue"
        Fill color of the bars. Any value accepted by the engine.
    kind : ColumnKind or {'numeric', 'categorical'}, optional
        Forces the column kind instead of inferring it.
    engine : {'matplotlib', 'plotly'}, default='matplotlib'
        Plotting engine used to build the figure.

    Other Parameters
    ----------------
    edgecolor : str, default="black"
        Outline color of the bars.
    opacity : float, default=0.7
        Transparency of the bars.
    linewidth : float, default=0.5
        Outline thickness.
    nan_policy : {'include', 'drop', 'raise'}, default='include'
        Handling of missing values in the column:
        - 'include' : pass them to the engine unchanged. Both engines skip
          missing values when binning, bar charts show them as a ``"NaN"``
          category.
        - 'drop' : ignore missing values.
        - 'raise' : raise ValueError if missing values are present.
    title : str, optional
        Overrides the automatic title.
    xlabel : str, optional
        X-axis label. Defaults to the column name.
    ylabel : str, optional
        Y-axis label. Defaults to ``"count"``.
    figsize : tuple[float, float], default=(10, 6)
        Matplotlib figure size in inches.
    width : int, default=800
        Plotly figure width in pixels.
    height : int, default=500
        Plotly figure height in pixels.
    theme : str or None, default="minimal"
        Visual theme, see :class:`ChartStyle`.

    Returns
    -------
    VisualizationResult
        Frozen container with the figure, the axes (Matplotlib only), the
        engine name, the size, the title, the chart kind, the column name and
        the chart configuration in ``extra_info``.

    Raises
    ------
    ColumnNotFoundError
        If `column` is not a column of `dataset`. Checked before anything else.
    TypeError
        If `dataset` is None or not tabular.
        If an unsupported styling option is passed.
    ValueError
        If `engine`, `kind` or `nan_policy` is unsupported.
        If ``nan_policy='raise'`` and the column contains missing values.

    Warns
    -----
    UserWarning
        If the column has no values (after applying `nan_policy`). The chart
        is still returned, without bars.

    Examples
    --------
    >>> import pandas as pd
    >>> import columnviz
    >>> df = pd.DataFrame({"categorical_column": ["cat", "bat", "cat", "dog"]})
    >>> result = columnviz.visualize(df, "categorical_column",
    ...                              fill_color="darkolivegreen")
    >>> result.kind
    <ChartKind.BAR: 'bar'>
    >>> [t.get_text() for t in result.axes.get_xticklabels()]
    ['bat', 'cat', 'dog']

    Interactive version with missing values ignored:

    >>> df = pd.DataFrame({"age": [21, 35, None, 48]})
    >>> result = columnviz.visualize(df, "age", bins=10, engine="plotly",
    ...                              nan_policy="drop")
    >>> result.figure.data[0].type
    'histogram'
    """
    series = resolve_column(dataset, column)
    style = ChartStyle.from_options(**options)
    validate_engine(engine)

    column_kind = _resolve_kind(series, kind)
    chart_kind = ChartKind.for_column(column_kind)
    logger.debug("Column %r classified as %s, drawing %s chart",
                 column, column_kind.value, chart_kind.value)

    series = handle_nan(series, style.nan_policy,
                        supported_policy=("include", "drop", "raise"),
                        data_name=str(column))
    if series.empty:
        warnings.warn(WRN_MSG_EMPTY_DATA_F.format(column, chart_kind.value),
                      UserWarning)

    title = (style.title if style.title is not None
             else TITLE_TEMPLATES[chart_kind].format(column))
    draw = _DRAWERS[engine][chart_kind]
    figure, axes = draw(series, column, bins, fill_color, style, title)

    width, height = ((style.figsize[0], style.figsize[1]) if engine == "matplotlib"
                     else (style.width, style.height))
    return VisualizationResult(
        figure=figure,
        axes=axes,
        engine=engine,
        width=width,
        height=height,
        title=title,
        kind=chart_kind,
        column=column,
        extra_info={
            "bins": _effective_bins(figure, engine, chart_kind, bins),
            "fill_color": fill_color,
            "edgecolor": style.edgecolor,
            "opacity": style.opacity,
            "linewidth": style.linewidth,
            "nan_policy": style.nan_policy,
        },
    )


def resolve_column(dataset: pd.DataFrame | Mapping[Hashable, Sequence[Any]],
                   column: Hashable) -> pd.Series:
    """
    Return the values of `column` from `dataset`.

    Raises
    ------
    TypeError
        If `dataset` is None or is neither a DataFrame nor a mapping.
    ColumnNotFoundError
        If `column` is not among the dataset's column names.
    """
    if isinstance(dataset, Mapping) and not _mapping_has_key(dataset, column):
        # fail before building a DataFrame from the mapping
        _raise_column_not_found(column)
    df = convert_dataframe(dataset)
    try:
        validate_column_exists(df, column,
                               err_msg=ERR_MSG_COLUMN_NOT_FOUND_F.format(column))
    except ColumnNotFoundError:
        logger.error("Column %r not found. Available columns: %s",
                     column, list(df.columns))
        raise
    return df[column]


def infer_column_kind(data: pd.Series) -> ColumnKind:
    """
    Classify a column as numeric or categorical.

    Rules, in order:

    1. Boolean and ``category`` dtypes are categorical.
    2. Other numeric dtypes (integers, floats, nullable ``Int64``...) are
       numeric.
    3. ``object`` columns are numeric when every non-missing value is a real
       number and there is at least one such value.
    4. Everything else (strings, dates, empty object columns) is categorical.

    Parameters
    ----------
    data : pandas.Series
        Column values.

    Returns
    -------
    ColumnKind

    Examples
    --------
    >>> infer_column_kind(pd.Series([1.5, 2.0]))
    <ColumnKind.NUMERIC: 'numeric'>
    >>> infer_column_kind(pd.Series([1, None, 3.5], dtype=object))
    <ColumnKind.NUMERIC: 'numeric'>
    >>> infer_column_kind(pd.Series(["a", 1]))
    <ColumnKind.CATEGORICAL: 'categorical'>
    """
    dtype = data.dtype
    if pd.api.types.is_bool_dtype(dtype) or isinstance(dtype, pd.CategoricalDtype):
        return ColumnKind.CATEGORICAL
    if pd.api.types.is_numeric_dtype(dtype):
        return ColumnKind.NUMERIC
    if pd.api.types.is_object_dtype(dtype):
        values = data.dropna()
        if not values.empty and all(
                isinstance(v, Real) and not isinstance(v, (bool, np.bool_))
                for v in values):
            return ColumnKind.NUMERIC
    return ColumnKind.CATEGORICAL


def _resolve_kind(series: pd.Series, kind: Optional[ColumnKind | str]) -> ColumnKind:
    if kind is None:
        return infer_column_kind(series)
    try:
        return ColumnKind(kind)
    except ValueError as exc:
        raise ValueError(ERR_MSG_UNSUPPORTED_KIND_F.format(
            kind, tuple(k.value for k in ColumnKind))) from exc


def _effective_bins(figure, engine: str, chart_kind: ChartKind, bins):
    if chart_kind is not ChartKind.HISTOGRAM:
        return None
    if engine == "plotly":
        # nbinsx == 0 means plotly chose the bins itself
        return figure.data[0].nbinsx or None
    return bins


def _mapping_has_key(mapping: Mapping, key: Hashable) -> bool:
    try:
        return key in mapping
    except TypeError:
        return False


def _raise_column_not_found(column: Hashable):
    logger.error("Column %r not found in the dataset.", column)
    raise ColumnNotFoundError(ERR_MSG_COLUMN_NOT_FOUND_F.format(column))


def _count_categories(series: pd.Series) -> pd.Series:
    """
    Count occurrences per category, keeping missing values as a category.

    Declared categories keep their order, numeric labels are sorted by value
    and other labels by their string representation. Categories that never
    occur are dropped, and labels with the same string representation are
    counted together.
    """
    counts = series.value_counts(sort=False, dropna=False)
    if not isinstance(series.dtype, pd.CategoricalDtype):
        key = (None if pd.api.types.is_numeric_dtype(counts.index.dtype)
               else lambda index: index.astype(str))
        counts = counts.sort_index(key=key)
    counts = counts[counts > 0]
    counts.index = [MISSING_LABEL if pd.isna(label) else str(label)
                    for label in counts.index]
    # 1 and "1" share a tick label, so they share a bar
    return counts.groupby(level=0, sort=False).sum()


def _as_float_array(series: pd.Series) -> np.ndarray:
    return series.to_numpy(dtype=float, na_value=np.nan)


def _mpl_histogram(series, column, bins, fill_color, style, title):
    values = _as_float_array(series)
    with temp_plot_theme(style=resolve_theme(style.theme, "matplotlib")):
        fig, ax = plt.subplots(figsize=style.figsize)
        # histplot skips missing values; nothing is left to bin otherwise
        if not np.isnan(values).all():
            sns.histplot(x=values, bins=bins, color=fill_color,
                         edgecolor=style.edgecolor, alpha=style.opacity,
                         linewidth=style.linewidth, ax=ax)
        _decorate_mpl_axes(ax, column, style, title)
    return fig, ax


def _mpl_barchart(series, column, bins, fill_color, style, title):
    # pylint: disable=W0613
    counts = _count_categories(series)
    with temp_plot_theme(style=resolve_theme(style.theme, "matplotlib")):
        fig, ax = plt.subplots(figsize=style.figsize)
        if not counts.empty:
            ax.bar(list(counts.index), counts.to_numpy(), color=fill_color,
                   edgecolor=style.edgecolor, alpha=style.opacity,
                   linewidth=style.linewidth)
        _decorate_mpl_axes(ax, column, style, title)
    return fig, ax


def _decorate_mpl_axes(ax, column, style, title):
    if style.theme == MINIMAL_THEME:
        apply_minimal_axes(ax)
    ax.set_title(title)
    ax.set_xlabel(style.xlabel if style.xlabel is not None else str(column))
    ax.set_ylabel(style.ylabel if style.ylabel is not None else "count")


def _plotly_histogram(series, column, bins, fill_color, style, title):
    fig = px.histogram(
        x=_as_float_array(series),
        nbins=bins,
        template=resolve_theme(style.theme, "plotly"),
        title=title,
        width=style.width,
        height=style.height,
    )
    _decorate_plotly_figure(fig, column, fill_color, style)
    return fig, None


def _plotly_barchart(series, column, bins, fill_color, style, title):
    # pylint: disable=W0613
    counts = _count_categories(series)
    fig = px.bar(
        x=list(counts.index),
        y=counts.to_numpy(),
        template=resolve_theme(style.theme, "plotly"),
        title=title,
        width=style.width,
        height=style.height,
    )
    fig.update_xaxes(type="category")
    _decorate_plotly_figure(fig, column, fill_color, style)
    return fig, None


def _decorate_plotly_figure(fig, column, fill_color, style):
    fig.update_traces(marker_color=fill_color,
                      marker_line_color=style.edgecolor,
                      marker_line_width=style.linewidth,
                      opacity=style.opacity)
    fig.update_layout(
        xaxis_title=style.xlabel if style.xlabel is not None else str(column),
        yaxis_title=style.ylabel if style.ylabel is not None else "count",
    )


_DRAWERS = {
    "matplotlib": {
        ChartKind.HISTOGRAM: _mpl_histogram,
        ChartKind.BAR: _mpl_barchart,
    },
    "plotly": {
        ChartKind.HISTOGRAM: _plotly_histogram,
        ChartKind.BAR: _plotly_barchart,
    },
}
