DISPATCH_APOLOGY = "I encountered an error while processing your query. Please try again."
UNEXPECTED_APOLOGY = (
    "I encountered an error while processing your query. "
    "Please try rephrasing or ask a different question."
)


class QueryFailure(Exception):
    """A submission that cannot produce an answer.

    ``user_message`` is the fixed text shown in place of the answer; the
    technical reason stays in ``args`` and the chained ``__cause__``.
    """

    user_message = UNEXPECTED_APOLOGY

    def __init__(self, reason: str = "", user_message: str | None = None):
        super().__init__(reason or self.user_message)
        if user_message is not None:
            self.user_message = user_message


class DispatchFailure(QueryFailure):
    """Network, API or credential error while calling the language model."""

    user_message = DISPATCH_APOLOGY
