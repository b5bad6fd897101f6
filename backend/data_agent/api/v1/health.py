from fastapi import APIRouter
from ...core.config import settings

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok", "provider": settings.LLM_PROVIDER}
