from typing import Optional, Sequence

from ..schemas.query import DataPoint

TIME_WORDS = ("year", "month", "quarter")


def select_chart_type(points: Sequence[DataPoint]) -> Optional[str]:
    """Pick a chart kind for extracted points.

    Precedence is fixed: a small "rate" value means pie, any time word
    means line, everything else is a bar comparison.
    """
    if not points:
        return None
    if any(p.value <= 100 and "rate" in p.label.lower() for p in points):
        return "pie"
    if any(word in p.label.lower() for p in points for word in TIME_WORDS):
        return "line"
    return "bar"
