"""
Styling options accepted by :func:`columnviz.visualize`.

The set of options is closed: every keyword argument passed to ``visualize``
beyond its named parameters must be a field of :class:`ChartStyle`.
Unknown keys are rejected instead of being forwarded to the plotting engine.

Examples
--------
>>> from columnviz.visualizations.style import ChartStyle
>>> ChartStyle.from_options(opacity=1.0, nan_policy="drop").opacity
1.0
>>> ChartStyle.from_options(colour="red")
Traceback (most recent call last):
    ...
TypeError: Unsupported chart option(s): 'colour'. Supported options are: ...
"""

from dataclasses import dataclass, fields
from typing import Any, Optional, Sequence

from columnviz._utils import read_config

ERR_MSG_UNSUPPORTED_OPTIONS_F = read_config("messages")["errors"][
    "unsupported_options_f"
]

MINIMAL_THEME = "minimal"


@dataclass(frozen=True)
class ChartStyle:
    """
    Styling options shared by the histogram and bar chart primitives.

    Parameters
    ----------
    edgecolor : str, default="black"
        Outline color of bars.
    opacity : float, default=0.7
        Fill transparency (alpha).
    linewidth : float, default=0.5
        Outline thickness (points for Matplotlib, pixels for Plotly).
    nan_policy : {'include', 'drop', 'raise'}, default='include'
        How missing values of the plotted column are handled:
        - 'include' : leave them to the plotting engine.
        - 'drop' : ignore missing values.
        - 'raise' : raise ValueError if any value is missing.
    title : str, optional
        Chart title. Defaults to ``"Histogram of {column}"`` or
        ``"Bar chart of {column}"``.
    xlabel : str, optional
        X-axis label. Defaults to the column name.
    ylabel : str, optional
        Y-axis label. Defaults to ``"count"``.
    figsize : Sequence[float], default=(10, 6)
        Matplotlib figure size in inches.
    width : int, default=800
        Plotly figure width in pixels.
    height : int, default=500
        Plotly figure height in pixels.
    theme : str or None, default="minimal"
        ``"minimal"`` applies a light grid without axis spines (Matplotlib)
        or the ``plotly_white`` template (Plotly). Any other string is used
        as a Seaborn style name or a Plotly template name. ``None`` keeps
        the engine's current defaults.
    """

    edgecolor: Any = "black"
    opacity: float = 0.7
    linewidth: float = 0.5
    nan_policy: str = "include"
    title: Optional[str] = None
    xlabel: Optional[str] = None
    ylabel: Optional[str] = None
    figsize: Sequence[float] = (10, 6)
    width: int = 800
    height: int = 500
    theme: Optional[str] = MINIMAL_THEME

    @classmethod
    def supported_options(cls) -> tuple[str, ...]:
        """Names of all accepted styling options."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_options(cls, **options) -> "ChartStyle":
        """
        Build a style from keyword options, rejecting unknown keys.

        Raises
        ------
        TypeError
            If any key is not a field of ``ChartStyle``.
        """
        supported = cls.supported_options()
        unknown = [key for key in options if key not in supported]
        if unknown:
            raise TypeError(
                ERR_MSG_UNSUPPORTED_OPTIONS_F.format(
                    ", ".join(repr(key) for key in unknown), ", ".join(supported)
                )
            )
        return cls(**options)
