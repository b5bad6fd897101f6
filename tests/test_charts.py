"""Tests for the chart kind heuristic."""

from data_agent.schemas.query import DataPoint
from data_agent.services.charts import select_chart_type


def pts(*pairs):
    return [DataPoint(label=label, value=value) for label, value in pairs]


def test_empty_means_no_chart():
    assert select_chart_type([]) is None


def test_small_rate_wins_over_everything():
    points = pts(("Revenue this year", 5_000_000), ("Churn Rate", 4.5), ("Sales", 300))
    assert select_chart_type(points) == "pie"


def test_rate_above_100_is_not_pie():
    assert select_chart_type(pts(("conversion rate", 250))) == "bar"


def test_rate_at_exactly_100_is_pie():
    assert select_chart_type(pts(("Success RATE", 100))) == "pie"


def test_time_words_mean_line():
    assert select_chart_type(pts(("Revenue last Year", 10))) == "line"
    assert select_chart_type(pts(("Sales per month", 10))) == "line"
    assert select_chart_type(pts(("Q", 1), ("best quarter", 3))) == "line"


def test_default_is_bar():
    assert select_chart_type(pts(("Revenue", 10), ("Cost", 7))) == "bar"
