"""
Example usage of columnviz.

Run from the repository root:

    python examples/basic_usage.py

Charts are written to ``./plots``.
"""
import pandas as pd

import columnviz

df = pd.DataFrame({
    "numeric_column": [1, 2, 3, 10, 14, 14, 12, 12, 12, 8],
    "categorical_column": ["cat", "bat", "cat", "cat", "dog",
                           "cat", "bat", "dog", "cat", "bat"],
})

# Bar chart of a categorical column
bar = columnviz.visualize(df, "categorical_column", fill_color="darkolivegreen")
columnviz.save_chart(bar, "./plots", plot_name="categorical_column")

# Histogram of a numeric column
histogram = columnviz.visualize(df, "numeric_column", bins=5,
                                fill_color="darkorchid")
columnviz.save_chart(histogram, "./plots", plot_name="numeric_column")

# Interactive version of the same histogram
interactive = columnviz.visualize(df, "numeric_column", bins=5,
                                  fill_color="darkorchid", engine="plotly")
columnviz.save_chart(interactive, "./plots", plot_name="numeric_column")

# Unknown columns are rejected before anything is drawn
try:
    columnviz.visualize(df, "non_existent_column")
except columnviz.ColumnNotFoundError as e:
    print(e)
