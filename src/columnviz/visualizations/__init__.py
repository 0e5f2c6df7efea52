"""
Column visualizations.

This subpackage turns one column of a dataset into a histogram (numeric
columns) or a bar chart (categorical columns).

Functions available at the top level include:
- visualize: plot a column as a histogram or a bar chart
- infer_column_kind: classify a column as numeric or categorical
- resolve_column: look up a column, raising ColumnNotFoundError if absent
- save_chart: write a VisualizationResult's figure to disk

Classes available at the top level include:
- ChartStyle: the styling options accepted by ``visualize``
"""

from .column import visualize, infer_column_kind, resolve_column
from .export import save_chart
from .style import ChartStyle

__all__ = [
    "visualize",
    "infer_column_kind",
    "resolve_column",
    "save_chart",
    "ChartStyle",
]
