from fastapi import APIRouter, HTTPException
from ...schemas.query import NLQuery, QueryResult
from ...services.pipeline import process_query

router = APIRouter()

@router.post("/query", response_model=QueryResult)
def query(body: NLQuery):
    try:
        return process_query(body.question)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
