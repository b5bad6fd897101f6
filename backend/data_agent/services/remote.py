"""Thin HTTP client the Streamlit UI uses to reach the query API."""

import logging

import requests
from pydantic import ValidationError

from ..core.errors import QueryFailure
from ..schemas.query import QueryResult

logger = logging.getLogger(__name__)

def ask(api: str, question: str, timeout: float = 180) -> QueryResult:
    """POST ``question`` to ``{api}/query`` and parse the result.

    Any transport error, non-2xx status, non-JSON body or body that is not a
    QueryResult raises ``QueryFailure``.
    """
    try:
        r = requests.post(f"{api}/query", json={"question": question}, timeout=timeout)
        r.raise_for_status()
        return QueryResult.model_validate(r.json())
    except (requests.RequestException, ValidationError, ValueError) as e:
        logger.warning("Query API call failed: %s", e)
        raise QueryFailure(f"{type(e).__name__}: {e}") from e
