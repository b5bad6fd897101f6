import logging
from typing import Callable, Optional

from ..core.errors import DispatchFailure
from ..schemas.query import QueryResult
from .charts import select_chart_type
from .dispatcher import dispatch
from .insights import extract_data_points

logger = logging.getLogger(__name__)

def process_query(query: str, generate: Optional[Callable[[str], str]] = None) -> QueryResult:
    """Question in, QueryResult out.

    A failed dispatch still produces a well-formed result with ``error`` set.
    A blank question raises ``ValueError``.
    """
    query = (query or "").strip()
    try:
        answer = dispatch(query, generate=generate)
    except DispatchFailure as e:
        logger.warning("Query dispatch failed: %s", e, exc_info=e.__cause__ is not None)
        return QueryResult.failed(query, e.user_message)

    points = extract_data_points(answer)
    chart_type = select_chart_type(points)
    logger.info("Answered query with %d data points, chart=%s", len(points), chart_type)
    return QueryResult(
        query=query,
        answer=answer,
        sql="",  # no SQL is generated; the model answers directly
        data=[p.model_dump() for p in points],
        chart_type=chart_type,
    )
