import logging

import requests
from google import genai

from ..core.config import settings
from ..core.errors import DispatchFailure
from .samples import sample_answer

logger = logging.getLogger(__name__)

def gemini_generate(prompt: str) -> str:
    if not settings.GEMINI_API_KEY:
        raise DispatchFailure("GEMINI_API_KEY is not configured")
    logger.debug("Calling Gemini model %s", settings.GEMINI_MODEL)
    client = genai.Client(api_key=settings.GEMINI_API_KEY)
    resp = client.models.generate_content(model=settings.GEMINI_MODEL, contents=prompt)
    return resp.text or ""

def ollama_generate(prompt: str) -> str:
    r = requests.post(
        f"{settings.OLLAMA_HOST}/api/generate",
        json={"model": settings.OLLAMA_MODEL, "prompt": prompt, "stream": False},
        timeout=settings.OLLAMA_TIMEOUT,
    )
    r.raise_for_status()
    return r.json().get("response", "")

def sample_generate(prompt: str) -> str:
    return sample_answer(prompt)

PROVIDERS = {
    "gemini": gemini_generate,
    "ollama": ollama_generate,
    "sample": sample_generate,
}

def get_provider(name: str | None = None):
    name = (name or settings.LLM_PROVIDER).strip().lower()
    try:
        return PROVIDERS[name]
    except KeyError:
        raise DispatchFailure(f"Unknown LLM provider: {name!r}") from None
