"""
Type utilities used throughout columnviz.

This module defines the tags that classify columns and charts, and the
container returned by every visualization call.

Classes
-------
ColumnKind
    Tag describing how a column is plotted: ``NUMERIC`` columns are binned
    into histograms, ``CATEGORICAL`` columns are counted into bar charts.
ChartKind
    Tag describing which chart a :class:`VisualizationResult` holds.
VisualizationResult
    Immutable container object returned by :func:`columnviz.visualize`.
    Stores the generated figure, axes (if applicable), engine metadata,
    sizing information and the chart configuration.

Examples
--------
>>> import columnviz
>>> res = columnviz.visualize({"x": [1, 2, 3]}, "x", bins=3)
>>> res.kind
<ChartKind.HISTOGRAM: 'histogram'>
>>> res.extra_info["bins"]
3
>>> res.title
'Histogram of x'
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Union

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from plotly.graph_objs import Figure as PxFigure


class ColumnKind(str, Enum):
    """Value domain of a column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


class ChartKind(str, Enum):
    """Chart drawn for a column."""

    HISTOGRAM = "histogram"
    BAR = "bar"

    @classmethod
    def for_column(cls, kind: ColumnKind) -> "ChartKind":
        """Return the chart kind used to draw a column of the given kind."""
        return cls.HISTOGRAM if kind is ColumnKind.NUMERIC else cls.BAR


@dataclass(frozen=True)
class VisualizationResult:
    """
    Standardized container for the output of columnviz visualizations.

    The container is engine-agnostic and supports both Matplotlib and Plotly.
    Instances are frozen: the chart configuration recorded here describes the
    figure at construction time and cannot be reassigned. The figure itself
    remains the engine's native object and can be further decorated or
    rendered by the caller.

    Parameters
    ----------
    figure : matplotlib.figure.Figure or plotly.graph_objects.Figure
        The figure object produced by the visualization function.
    axes : matplotlib.axes.Axes or None, default=None
        The primary axes object when using Matplotlib.
        Plotly visualizations do not use axes and set this attribute to ``None``.
    engine : {'matplotlib', 'plotly'}
        Name of the plotting engine used to generate the visualization.
    width : float or None
        Width of the figure:
        - Measured in inches for Matplotlib.
        - Measured in pixels for Plotly.
    height : float or None
        Height of the figure:
        - Measured in inches for Matplotlib.
        - Measured in pixels for Plotly.
    title : str or None
        Title of the generated visualization.
    kind : ChartKind or None
        Which chart the figure holds (histogram or bar chart).
    column : Hashable or None
        Label of the plotted column.
    extra_info : Mapping
        Read-only chart configuration used to build the figure. Keys are
        ``'bins'`` (``None`` for bar charts), ``'fill_color'``,
        ``'edgecolor'``, ``'opacity'``, ``'linewidth'`` and ``'nan_policy'``.

    Notes
    -----
    Backend-specific methods remain available. For example:

    - Matplotlib: ``figure.savefig(...)``
    - Plotly: ``figure.write_html(...)`` or ``figure.to_json()``

    Examples
    --------
    >>> import columnviz
    >>> result = columnviz.visualize({"pet": ["cat", "dog", "cat"]}, "pet")
    >>> result.figure        # Matplotlib Figure
    >>> result.axes          # Matplotlib Axes
    >>> result.engine
    'matplotlib'
    >>> result.kind
    <ChartKind.BAR: 'bar'>
    """

    figure: Union[Figure, PxFigure]
    axes: Optional[Axes] = None
    engine: str = "matplotlib"
    width: Optional[float] = None
    height: Optional[float] = None
    title: Optional[str] = None
    kind: Optional[ChartKind] = None
    column: Optional[Hashable] = None
    extra_info: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # stored as a read-only copy
        object.__setattr__(self, "extra_info",
                           MappingProxyType(dict(self.extra_info)))
