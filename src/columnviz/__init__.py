"""
columnviz: quick single-column charts for exploratory data analysis.

Features include:
- Automatic choice between a histogram and a bar chart
- Matplotlib (static) and Plotly (interactive) engines
- Missing value policies
- Figure export
"""
import logging

from .exceptions import ColumnNotFoundError
from .types import ChartKind, ColumnKind, VisualizationResult
from .visualizations import (ChartStyle, infer_column_kind, save_chart,
                             visualize)

__version__ = "0.1.0"

__all__ = [
    "visualize",
    "infer_column_kind",
    "save_chart",
    "ChartStyle",
    "ChartKind",
    "ColumnKind",
    "ColumnNotFoundError",
    "VisualizationResult",
]

logger = logging.getLogger("columnviz")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
