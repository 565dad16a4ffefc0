from collections.abc import Callable, Iterable
from logging import Logger
from typing import Generic, TypeVar, cast

from .sequencer import SpanSequencer

T = TypeVar("T")
C = TypeVar("C")


def spans_by_key(
    iterable: Iterable[T],
    key: Callable[[T], C],
    are_connected: Callable[[C, C], bool],
    logger: Logger | None = None,
) -> SpanSequencer[T, C]:
    """Split an iterable into contiguous spans.

    ``are_connected`` returns ``True`` if two adjacent items are part of the same
    span, ``False`` otherwise. Items are not compared directly: a key is made
    for each item with ``key`` and ``are_connected`` receives the key of the
    previous item and the key of the current item. ``key`` is called exactly
    once per item.

    Spans of numbers increasing by 1:

        >>> spans = spans_by_key([1, 2, 5, 6, 7, 11, 13, 14, 15], lambda x: x, lambda a, b: a + 1 == b)
        >>> [list(span) for span in spans]
        [[1, 2], [5, 6, 7], [11], [13, 14, 15]]

    Spans of strings of the same length:

        >>> words = ["abc", "run", "tag", "go", "be", "ring", "zip", "zap", "put"]
        >>> spans = spans_by_key(words, len, lambda a, b: a == b)
        >>> list(next(spans))
        ['abc', 'run', 'tag']
        >>> list(next(spans))
        ['go', 'be']

    Every span shares the source cursor with the sequencer, so a span has to be
    drained (or abandoned) before the next one is requested. Pulling from a span
    after a newer one was handed out raises ``StaleSpanError``.
    """
    return SpanSequencer(
        source=iterable,
        key=key,
        are_connected=are_connected,
        logger=logger,
    )


class Spans(Generic[T]):
    """Mixin giving any iterable class a ``spans_by_key`` method."""

    def spans_by_key(
        self,
        key: Callable[[T], C],
        are_connected: Callable[[C, C], bool],
        logger: Logger | None = None,
    ) -> SpanSequencer[T, C]:
        return spans_by_key(cast(Iterable[T], self), key, are_connected, logger)
