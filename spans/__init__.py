from .adapter import Spans, spans_by_key
from .error import StaleSpanError
from .peekable import Peekable
from .sequencer import SpanSequencer
from .span import Span, SpanState

__all__ = [
    "spans_by_key",
    "Spans",
    "SpanSequencer",
    "Span",
    "SpanState",
    "Peekable",
    "StaleSpanError",
]
