"""Quotes, handles, the evaluation context and the notification substrate."""

from .context import EvaluationContext
from .handles import EmptyHandleError, Handle, RelinkableHandle
from .observable import Observable, Observer
from .quotes import Quote, SimpleQuote

__all__ = [
    "Observable",
    "Observer",
    "Handle",
    "RelinkableHandle",
    "EmptyHandleError",
    "Quote",
    "SimpleQuote",
    "EvaluationContext",
]
