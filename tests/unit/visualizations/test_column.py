from collections import deque

import pandas as pd
import numpy as np

import pytest

from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
import plotly.express as px
import seaborn as sns
from plotly.graph_objs import Figure as PxFigure

from columnviz import (visualize, infer_column_kind, ChartKind, ColumnKind,
                       ColumnNotFoundError, VisualizationResult)
from columnviz.visualizations import resolve_column

NUMERIC_VALUES = [1, 2, 3, 10, 14, 14, 12, 12, 12, 8]
CATEGORICAL_VALUES = ["cat", "bat", "cat", "cat", "dog", "cat", "bat", "dog", "cat", "bat"]

ENGINES = ["matplotlib", "plotly"]


@pytest.fixture
def df():
    return pd.DataFrame({"numeric_column": NUMERIC_VALUES,
                         "categorical_column": CATEGORICAL_VALUES})


def close(result):
    if result.engine == "matplotlib":
        plt.close(result.figure)


# tests for column resolution

@pytest.mark.parametrize("engine", ENGINES)
def test_visualize_missing_column_raises(df, engine):
    with pytest.raises(ColumnNotFoundError,
                       match="Column 'non_existent_column' does not exist"):
        visualize(df, "non_existent_column", engine=engine)


def test_column_not_found_is_value_error(df):
    with pytest.raises(ValueError):
        visualize(df, "Numeric_Column")


def test_missing_column_checked_before_options(df):
    # an unknown option would raise TypeError if it were validated first
    with pytest.raises(ColumnNotFoundError):
        visualize(df, "non_existent_column", colour="red", engine="bokeh")


def test_missing_column_checked_before_mapping_conversion():
    # columns of unequal length cannot form a DataFrame
    dataset = {"a": [1, 2, 3], "b": [1, 2]}
    with pytest.raises(ColumnNotFoundError):
        visualize(dataset, "c")


def test_missing_column_is_logged(df, caplog):
    with pytest.raises(ColumnNotFoundError):
        visualize(df, "non_existent_column")
    assert any("non_existent_column" in message for message in caplog.messages)


def test_unhashable_column_raises_column_not_found(df):
    with pytest.raises(ColumnNotFoundError):
        visualize(df, ["numeric_column"])


def test_visualize_none_dataset_raises_type_error():
    with pytest.raises(TypeError):
        visualize(None, "numeric_column")


def test_resolve_column_accepts_mapping():
    series = resolve_column({"a": deque([1, 2, 3])}, "a")
    assert series.tolist() == [1, 2, 3]


# tests for columnviz.infer_column_kind()

@pytest.mark.parametrize("series, expected", [
    (pd.Series([1, 2, 3]), ColumnKind.NUMERIC),
    (pd.Series([1.5, np.nan, 3.0]), ColumnKind.NUMERIC),
    (pd.Series([1, None, 3], dtype="Int64"), ColumnKind.NUMERIC),
    (pd.Series([1, None, 2.5], dtype=object), ColumnKind.NUMERIC),
    (pd.Series([np.int64(1), np.float32(2.0)], dtype=object), ColumnKind.NUMERIC),
    (pd.Series(["a", "b"]), ColumnKind.CATEGORICAL),
    (pd.Series(["a", 1]), ColumnKind.CATEGORICAL),
    (pd.Series([True, False]), ColumnKind.CATEGORICAL),
    (pd.Series([True, 1], dtype=object), ColumnKind.CATEGORICAL),
    (pd.Series([1, 2, 1], dtype="category"), ColumnKind.CATEGORICAL),
    (pd.Series([], dtype=object), ColumnKind.CATEGORICAL),
    (pd.Series([None, None], dtype=object), ColumnKind.CATEGORICAL),
    (pd.Series([], dtype=float), ColumnKind.NUMERIC),
])
def test_infer_column_kind(series, expected):
    assert infer_column_kind(series) is expected


# tests for columnviz.visualize() with matplotlib

def test_visualize_returns_visualization_result(df):
    result = visualize(df, "numeric_column")
    assert isinstance(result, VisualizationResult)
    assert isinstance(result.figure, Figure)
    assert isinstance(result.axes, Axes)
    assert result.engine == "matplotlib"
    assert (result.width, result.height) == (10, 6)
    close(result)


@pytest.mark.parametrize("bins", [1, 5, 30])
def test_visualize_numeric_builds_histogram(df, bins):
    result = visualize(df, "numeric_column", bins=bins)
    assert result.kind is ChartKind.HISTOGRAM
    assert result.extra_info["bins"] == bins
    assert len(result.axes.patches) == bins
    assert sum(p.get_height() for p in result.axes.patches) == len(NUMERIC_VALUES)
    close(result)


def test_visualize_numeric_histogram_style(df):
    result = visualize(df, "numeric_column", bins=5, fill_color="darkorchid")
    patch = result.axes.patches[0]
    assert np.allclose(patch.get_facecolor(), to_rgba("darkorchid", 0.7))
    assert np.allclose(patch.get_edgecolor(), to_rgba("black"))
    assert patch.get_linewidth() == 0.5
    assert result.axes.get_title() == "Histogram of numeric_column"
    assert result.title == "Histogram of numeric_column"
    assert result.axes.get_xlabel() == "numeric_column"
    assert result.axes.get_ylabel() == "count"
    close(result)


def test_visualize_histogram_passes_options_to_histplot(df, mocker):
    spy = mocker.spy(sns, "histplot")
    result = visualize(df, "numeric_column", bins=7, fill_color="teal",
                       edgecolor="white", opacity=0.4, linewidth=2)
    spy.assert_called_once()
    kwargs = spy.call_args.kwargs
    assert kwargs["bins"] == 7
    assert kwargs["color"] == "teal"
    assert kwargs["edgecolor"] == "white"
    assert kwargs["alpha"] == 0.4
    assert kwargs["linewidth"] == 2
    assert kwargs["ax"] is result.axes
    close(result)


def test_visualize_categorical_builds_barchart(df):
    result = visualize(df, "categorical_column", fill_color="darkolivegreen")
    result.figure.canvas.draw()
    assert result.kind is ChartKind.BAR
    assert result.extra_info["bins"] is None
    assert result.extra_info["fill_color"] == "darkolivegreen"
    labels = [t.get_text() for t in result.axes.get_xticklabels()]
    assert labels == ["bat", "cat", "dog"]
    assert [p.get_height() for p in result.axes.patches] == [3, 5, 2]
    patch = result.axes.patches[0]
    assert np.allclose(patch.get_facecolor(), to_rgba("darkolivegreen", 0.7))
    assert np.allclose(patch.get_edgecolor(), to_rgba("black", 0.7))
    close(result)


def test_visualize_barchart_is_titled(df):
    result = visualize(df, "categorical_column")
    assert result.axes.get_title() == "Bar chart of categorical_column"
    assert result.title == "Bar chart of categorical_column"
    close(result)


def test_visualize_barchart_ignores_bins(df):
    result = visualize(df, "categorical_column", bins=2)
    assert len(result.axes.patches) == 3
    close(result)


def test_visualize_barchart_keeps_category_order():
    data = pd.DataFrame({"size": pd.Categorical(
        ["M", "S", "L", "M"], categories=["S", "M", "L", "XL"], ordered=True)})
    result = visualize(data, "size")
    result.figure.canvas.draw()
    labels = [t.get_text() for t in result.axes.get_xticklabels()]
    # unused categories are not drawn
    assert labels == ["S", "M", "L"]
    assert [p.get_height() for p in result.axes.patches] == [1, 2, 1]
    close(result)


def test_visualize_kind_override(df):
    result = visualize(df, "numeric_column", kind="categorical")
    assert result.kind is ChartKind.BAR
    assert len(result.axes.patches) == len(set(NUMERIC_VALUES))
    close(result)

    result = visualize({"codes": ["1", "2", "2"]}, "codes", bins=2,
                       kind=ColumnKind.NUMERIC)
    assert result.kind is ChartKind.HISTOGRAM
    close(result)


def test_visualize_unsupported_kind_raises(df):
    with pytest.raises(ValueError, match="Unsupported column kind"):
        visualize(df, "numeric_column", kind="ordinal")


def test_visualize_custom_labels_and_figsize(df):
    result = visualize(df, "numeric_column", title="Scores", xlabel="score",
                       ylabel="students", figsize=(12, 8))
    assert result.axes.get_title() == "Scores"
    assert result.axes.get_xlabel() == "score"
    assert result.axes.get_ylabel() == "students"
    assert result.figure.get_size_inches().tolist() == [12, 8]
    assert (result.width, result.height) == (12, 8)
    close(result)


def test_visualize_minimal_theme_hides_spines(df):
    result = visualize(df, "numeric_column")
    assert not any(spine.get_visible() for spine in result.axes.spines.values())
    assert result.axes.yaxis.get_gridlines()
    close(result)

    result = visualize(df, "numeric_column", theme=None)
    assert result.axes.spines["left"].get_visible()
    close(result)


def test_visualize_theme_does_not_leak(df):
    facecolor = plt.rcParams["axes.facecolor"]
    result = visualize(df, "numeric_column", theme="darkgrid")
    assert plt.rcParams["axes.facecolor"] == facecolor
    close(result)


def test_visualize_unknown_option_raises(df):
    with pytest.raises(TypeError, match="'colour'"):
        visualize(df, "numeric_column", colour="red")


def test_visualize_unsupported_engine_raises(df):
    with pytest.raises(ValueError, match="Unsupported engine"):
        visualize(df, "numeric_column", engine="bokeh")


@pytest.mark.parametrize("engine, bins", [
    ("matplotlib", 0),
    ("matplotlib", -5),
    ("plotly", -5),
])
def test_visualize_invalid_bins_error_is_delegated(df, engine, bins):
    with pytest.raises(ValueError):
        visualize(df, "numeric_column", bins=bins, engine=engine)


def test_visualize_plotly_zero_bins_is_automatic(df):
    result = visualize(df, "numeric_column", bins=0, engine="plotly")
    assert result.kind is ChartKind.HISTOGRAM
    assert result.figure.data[0].type == "histogram"
    assert result.extra_info["bins"] is None


def test_visualize_does_not_mutate_dataset():
    data = pd.DataFrame({"x": [1.0, np.nan, 3.0], "y": ["a", None, "b"]})
    expected = data.copy()
    result_x = visualize(data, "x", nan_policy="drop")
    result_y = visualize(data, "y", nan_policy="drop")
    pd.testing.assert_frame_equal(data, expected)
    close(result_x)
    close(result_y)


def test_visualize_is_idempotent(df):
    first = visualize(df, "numeric_column", bins=5, fill_color="darkorchid")
    second = visualize(df, "numeric_column", bins=5, fill_color="darkorchid")
    assert first.figure is not second.figure
    assert first.kind == second.kind
    assert first.title == second.title
    assert first.extra_info == second.extra_info
    assert ([p.get_height() for p in first.axes.patches]
            == [p.get_height() for p in second.axes.patches])
    assert ([p.get_x() for p in first.axes.patches]
            == [p.get_x() for p in second.axes.patches])
    close(first)
    close(second)


# empty data

def test_visualize_empty_dataset_returns_correct_kind():
    data = pd.DataFrame({"n": pd.Series([], dtype=float),
                         "c": pd.Series([], dtype=object)})
    with pytest.warns(UserWarning, match="has no values"):
        histogram = visualize(data, "n", bins=4)
    with pytest.warns(UserWarning, match="has no values"):
        barchart = visualize(data, "c")
    assert histogram.kind is ChartKind.HISTOGRAM
    assert barchart.kind is ChartKind.BAR
    assert len(histogram.axes.patches) == 0
    assert len(barchart.axes.patches) == 0
    close(histogram)
    close(barchart)


# missing values

def test_visualize_nan_policy_drop():
    data = pd.DataFrame({"n": [1.0, 2.0, np.nan, 4.0, None]})
    result = visualize(data, "n", bins=3, nan_policy="drop")
    assert result.kind is ChartKind.HISTOGRAM
    assert result.extra_info["nan_policy"] == "drop"
    assert sum(p.get_height() for p in result.axes.patches) == 3
    close(result)


def test_visualize_nan_policy_raise():
    data = pd.DataFrame({"n": [1.0, np.nan, 3.0], "c": ["a", None, "b"]})
    with pytest.raises(ValueError, match="contains null values"):
        visualize(data, "n", nan_policy="raise")
    with pytest.raises(ValueError, match="contains null values"):
        visualize(data, "c", nan_policy="raise")


def test_visualize_nan_policy_unsupported():
    with pytest.raises(ValueError, match="Unsupported method"):
        visualize({"n": [1, 2]}, "n", nan_policy="fill")


def test_visualize_barchart_includes_missing_category():
    data = pd.DataFrame({"c": ["a", np.nan, "b", "a", np.nan]})
    result = visualize(data, "c")
    result.figure.canvas.draw()
    labels = [t.get_text() for t in result.axes.get_xticklabels()]
    heights = dict(zip(labels, [p.get_height() for p in result.axes.patches]))
    assert heights == {"NaN": 2, "a": 2, "b": 1}
    close(result)

    result = visualize(data, "c", nan_policy="drop")
    assert len(result.axes.patches) == 2
    close(result)


def test_visualize_barchart_merges_labels_with_same_text():
    data = pd.DataFrame({"code": pd.Series([1, "1", 1, "2"], dtype=object)})
    result = visualize(data, "code")
    result.figure.canvas.draw()
    labels = [t.get_text() for t in result.axes.get_xticklabels()]
    assert labels == ["1", "2"]
    assert [p.get_height() for p in result.axes.patches] == [3, 1]
    close(result)


# tests for columnviz.visualize() with plotly

def test_visualize_plotly_histogram(df):
    result = visualize(df, "numeric_column", bins=5, fill_color="darkorchid",
                       engine="plotly")
    assert isinstance(result.figure, PxFigure)
    assert result.axes is None
    assert result.engine == "plotly"
    assert (result.width, result.height) == (800, 500)
    trace = result.figure.data[0]
    assert trace.type == "histogram"
    assert trace.nbinsx == 5
    assert trace.marker.color == "darkorchid"
    assert trace.marker.line.color == "black"
    assert trace.marker.line.width == 0.5
    assert trace.opacity == 0.7
    assert result.figure.layout.title.text == "Histogram of numeric_column"
    assert result.figure.layout.xaxis.title.text == "numeric_column"


def test_visualize_plotly_barchart(df):
    result = visualize(df, "categorical_column", fill_color="darkolivegreen",
                       engine="plotly", width=600, height=400)
    trace = result.figure.data[0]
    assert trace.type == "bar"
    assert list(trace.x) == ["bat", "cat", "dog"]
    assert list(trace.y) == [3, 5, 2]
    assert trace.marker.color == "darkolivegreen"
    assert result.figure.layout.title.text == "Bar chart of categorical_column"
    assert result.figure.layout.width == 600
    assert result.figure.layout.height == 400


def test_visualize_plotly_passes_bins(df, mocker):
    spy = mocker.spy(px, "histogram")
    visualize(df, "numeric_column", bins=7, engine="plotly")
    spy.assert_called_once()
    assert spy.call_args.kwargs["nbins"] == 7


def test_visualize_plotly_is_idempotent(df):
    first = visualize(df, "categorical_column", engine="plotly")
    second = visualize(df, "categorical_column", engine="plotly")
    assert first.figure is not second.figure
    assert first.figure.to_json() == second.figure.to_json()


def test_visualize_plotly_nan_policy_drop():
    data = pd.DataFrame({"n": [1.0, np.nan, 3.0]})
    result = visualize(data, "n", engine="plotly", nan_policy="drop")
    assert list(result.figure.data[0].x) == [1.0, 3.0]
