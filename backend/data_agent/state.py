"""Session state for the UI, updated only through ``reduce``.

Each transition returns a new ``SessionState``; the previous one is never
mutated, so the current result is always replaced as a whole.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .core.errors import UNEXPECTED_APOLOGY
from .schemas.query import QueryResult

HISTORY_LIMIT = 10


@dataclass(frozen=True)
class SessionState:
    result: Optional[QueryResult] = None
    history: Tuple[str, ...] = ()
    loading: bool = False
    dark_mode: bool = False


@dataclass(frozen=True)
class SubmitStarted:
    query: str


@dataclass(frozen=True)
class SubmitFinished:
    result: QueryResult


@dataclass(frozen=True)
class SubmitFailed:
    query: str
    message: str = UNEXPECTED_APOLOGY


@dataclass(frozen=True)
class ToggleDarkMode:
    pass


Action = Union[SubmitStarted, SubmitFinished, SubmitFailed, ToggleDarkMode]


def push_history(history: Tuple[str, ...], query: str, limit: int = HISTORY_LIMIT) -> Tuple[str, ...]:
    return ((query,) + history)[:limit]


def reduce(state: SessionState, action: Action) -> SessionState:
    if isinstance(action, SubmitStarted):
        if state.loading:
            return state
        return replace(state, history=push_history(state.history, action.query), loading=True)
    if isinstance(action, SubmitFinished):
        return replace(state, result=action.result, loading=False)
    if isinstance(action, SubmitFailed):
        return replace(state, result=QueryResult.failed(action.query, action.message), loading=False)
    if isinstance(action, ToggleDarkMode):
        return replace(state, dark_mode=not state.dark_mode)
    raise TypeError(f"Unknown action: {type(action).__name__}")
