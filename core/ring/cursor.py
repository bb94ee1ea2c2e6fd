from __future__ import annotations
from typing import Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .queue import RingQueue


T = TypeVar("T")


class Cursor(Generic[T]):
    """Forward position in a RingQueue, relative to its current front.

    The slot is resolved on every access, never captured. A cursor kept
    across pop_front() or a push_back() on a full queue points at a different
    element afterwards. Callers must not mutate the queue while holding one.

    Out-of-range access fails an ``assert``; under ``python -O`` the read is
    unchecked and returns whatever the wrapped slot holds.
    """

    __slots__ = ("_queue", "_offset")

    def __init__(self, queue: RingQueue[T], offset: int = 0) -> None:
        if offset < 0:
            raise ValueError(f"cursor offset must be >= 0, got {offset}")
        self._queue = queue
        self._offset = offset

    def offset(self) -> int:
        return self._offset

    def deref(self) -> T:
        q = self._queue
        assert 0 <= self._offset < q._count, f"cursor offset {self._offset} out of range (size {q._count})"
        return q._buf[q._slot(self._offset)]  # type: ignore

    def store(self, value: T) -> None:
        q = self._queue
        assert 0 <= self._offset < q._count, f"cursor offset {self._offset} out of range (size {q._count})"
        q._buf[q._slot(self._offset)] = value

    def advance(self) -> Cursor[T]:
        self._offset += 1
        return self

    def post_advance(self) -> Cursor[T]:
        copy = Cursor(self._queue, self._offset)
        self._offset += 1
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._queue is other._queue and self._offset == other._offset

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"Cursor(offset={self._offset})"
