from collections.abc import Callable, Iterable, Iterator
from logging import Logger
from typing import Generic, TypeVar, cast

from .peekable import Peekable
from .span import Span

T = TypeVar("T")
C = TypeVar("C")

_MISSING = object()


class SpanSequencer(Generic[T, C], Iterator[Span[T, C]]):
    """Progressive access to the contiguous spans of a source iterable.

    Each item's key is computed once, when the item is first peeked, and cached
    together with the buffered item until it is consumed. Only the most recently
    returned span may be pulled from; older spans raise ``StaleSpanError``.
    """

    def __init__(
        self,
        source: Iterable[T],
        key: Callable[[T], C],
        are_connected: Callable[[C, C], bool],
        logger: Logger | None = None,
    ) -> None:
        self._cursor: Peekable[T] = Peekable(source)
        self._key: Callable[[T], C] = key
        self._are_connected: Callable[[C, C], bool] = are_connected
        self._logger: Logger | None = logger
        self._lookahead_key: C = cast(C, _MISSING)
        self._spans_count: int = 0
        self._did_finish: bool = False

    @property
    def spans_count(self) -> int:
        return self._spans_count

    def next_span(self) -> Span[T, C] | None:
        if not self._cursor.has_next:
            if not self._did_finish:
                self._did_finish = True
                if self._logger is not None:
                    self._logger.debug(
                        f"source exhausted after {self._cursor.consumed} items in {self._spans_count} spans"
                    )
            return None

        seed_key = self._peek_key()
        span: Span[T, C] = Span(sequencer=self, index=self._spans_count, seed_key=seed_key)
        self._spans_count += 1

        if self._logger is not None:
            self._logger.debug(f"span #{span.index} started with key {seed_key!r}")
        return span

    def __iter__(self) -> "SpanSequencer[T, C]":
        return self

    def __next__(self) -> Span[T, C]:
        span = self.next_span()
        if span is None:
            raise StopIteration()
        return span

    def _is_active(self, span: Span[T, C]) -> bool:
        return span.index == self._spans_count - 1

    def _has_lookahead(self) -> bool:
        return self._cursor.has_next

    def _peek_key(self) -> C:
        if self._lookahead_key is _MISSING:
            item = self._cursor.peek()
            try:
                self._lookahead_key = self._key(item)
            except StopIteration as err:
                # 回调中的 StopIteration 会被误认为迭代结束，与生成器一样转为 RuntimeError
                raise RuntimeError("key function raised StopIteration") from err
        return self._lookahead_key

    def _connected(self, prev_key: C, next_key: C) -> bool:
        try:
            return self._are_connected(prev_key, next_key)
        except StopIteration as err:
            raise RuntimeError("are_connected raised StopIteration") from err

    def _advance(self) -> T:
        item = next(self._cursor)
        self._lookahead_key = cast(C, _MISSING)
        return item
