from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar, cast

T = TypeVar("T")

_MISSING = object()


class Peekable(Generic[T], Iterator[T]):
    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(iterable)
        self._peeked: T = cast(T, _MISSING)
        self._exhausted: bool = False
        self._consumed: int = 0

    @property
    def has_next(self) -> bool:
        if self._peeked is not _MISSING:
            return True
        if self._exhausted:
            return False
        try:
            self._peeked = next(self._iterator)
            return True
        except StopIteration:
            # 源迭代器结束后不再拉取，保证耗尽状态幂等
            self._exhausted = True
            return False

    @property
    def consumed(self) -> int:
        return self._consumed

    def peek(self) -> T:
        if not self.has_next:
            raise StopIteration()
        return self._peeked

    def __iter__(self) -> "Peekable[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next:
            raise StopIteration()
        value = self._peeked
        self._peeked = cast(T, _MISSING)
        self._consumed += 1
        return value
