import json
from datetime import date
from typing import Any, Dict, Optional

from ..schemas.query import QueryResult

EXPORT_FIELDS = ("query", "answer", "sql", "data")


def export_payload(result: QueryResult) -> Dict[str, Any]:
    return {
        "query": result.query,
        "answer": result.answer,
        "sql": result.sql,
        "data": [dict(row) for row in result.data],
    }


def export_json(result: QueryResult) -> str:
    return json.dumps(export_payload(result), indent=2, ensure_ascii=False)


def export_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"query-result-{day.isoformat()}.json"


def load_export(text: str) -> Dict[str, Any]:
    payload = json.loads(text)
    missing = [f for f in EXPORT_FIELDS if f not in payload]
    if missing:
        raise ValueError(f"Export is missing fields: {', '.join(missing)}")
    return payload
