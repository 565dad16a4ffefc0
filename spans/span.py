# pylint: disable=W0212
from collections.abc import Iterator
from enum import Enum, auto
from typing import TYPE_CHECKING, Generic, TypeVar

from .error import StaleSpanError

if TYPE_CHECKING:
    from .sequencer import SpanSequencer

T = TypeVar("T")
C = TypeVar("C")


class SpanState(Enum):
    FRESH = auto()
    ACTIVE = auto()
    EXHAUSTED = auto()


class Span(Generic[T, C], Iterator[T]):
    """One contiguous span of the parent sequencer's source.

    A span always yields at least one item: the sequencer only creates it once
    the look-ahead confirms an unconsumed item exists. The item that breaks
    adjacency is left in the source for the next span.
    """

    def __init__(self, sequencer: "SpanSequencer[T, C]", index: int, seed_key: C) -> None:
        self._sequencer: "SpanSequencer[T, C]" = sequencer
        self._index: int = index
        self._prev_key: C = seed_key
        self._state: SpanState = SpanState.FRESH
        self._yielded: int = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def state(self) -> SpanState:
        return self._state

    @property
    def yielded(self) -> int:
        return self._yielded

    @property
    def is_exhausted(self) -> bool:
        return self._state == SpanState.EXHAUSTED

    def __iter__(self) -> "Span[T, C]":
        return self

    def __next__(self) -> T:
        if self._state == SpanState.EXHAUSTED:
            raise StopIteration()

        sequencer = self._sequencer
        if not sequencer._is_active(self):
            raise StaleSpanError(
                span_index=self._index,
                active_index=sequencer.spans_count - 1,
            )

        if self._state == SpanState.FRESH:
            # 种子元素的 key 已在创建时计算，直接取出不再校验
            self._state = SpanState.ACTIVE
            return self._take()

        if not sequencer._has_lookahead():
            self._exhaust("source exhausted")
            raise StopIteration()

        peeked_key = sequencer._peek_key()
        connected = sequencer._connected(self._prev_key, peeked_key)
        self._prev_key = peeked_key

        if not connected:
            self._exhaust("adjacency broken")
            raise StopIteration()

        return self._take()

    def __repr__(self) -> str:
        return f"Span(index={self._index}, state={self._state.name}, yielded={self._yielded})"

    def _take(self) -> T:
        item = self._sequencer._advance()
        self._yielded += 1
        return item

    def _exhaust(self, reason: str) -> None:
        self._state = SpanState.EXHAUSTED
        logger = self._sequencer._logger
        if logger is not None:
            logger.debug(f"span #{self._index} ended after {self._yielded} items: {reason}")
