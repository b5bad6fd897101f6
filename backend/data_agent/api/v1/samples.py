from typing import Any, Dict, List
from fastapi import APIRouter, HTTPException
from ...services.samples import EXAMPLE_QUESTIONS, get_sample, sample_names

router = APIRouter()

@router.get("/samples", response_model=List[str])
def list_samples():
    return sample_names()

@router.get("/samples/{name}", response_model=List[Dict[str, Any]])
def read_sample(name: str):
    rows = get_sample(name)
    if not rows:
        raise HTTPException(status_code=404, detail=f"Unknown sample dataset: {name}")
    return rows

@router.get("/examples", response_model=List[str])
def list_examples():
    return EXAMPLE_QUESTIONS
