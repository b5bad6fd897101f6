"""Prompt Dispatcher: wraps a business question in the analyst prompt and
sends it to the configured language model."""

import logging
from typing import Callable, Optional

from langchain_core.prompts import PromptTemplate

from ..core.errors import DispatchFailure
from .provider import get_provider

logger = logging.getLogger(__name__)

ANALYST_TEMPLATE = (
    "You are an expert business analyst. Analyze this business question and "
    "provide detailed insights with specific numbers and metrics: {question}\n"
    "\n"
    "Please format your response to include:\n"
    "1. A clear, direct answer\n"
    "2. Key metrics and trends\n"
    "3. Specific numbers and percentages\n"
    "4. Business implications"
)

ANALYST_PROMPT = PromptTemplate.from_template(ANALYST_TEMPLATE)


def build_prompt(question: str) -> str:
    question = (question or "").strip()
    if not question:
        raise ValueError("Question must not be empty")
    return ANALYST_PROMPT.format(question=question)


def dispatch(question: str, generate: Optional[Callable[[str], str]] = None) -> str:
    """Return the model's answer text for ``question``.

    Raises ``ValueError`` for a blank question and ``DispatchFailure`` for
    anything that goes wrong talking to the model. There is no retry.
    """
    prompt = build_prompt(question)
    try:
        generate = generate or get_provider()
        answer = generate(prompt)
    except DispatchFailure:
        raise
    except Exception as e:
        raise DispatchFailure(f"{type(e).__name__}: {e}") from e

    if not (answer or "").strip():
        raise DispatchFailure("Language model returned an empty completion")
    logger.debug("Received %d characters from the language model", len(answer))
    return answer
