import operator
from typing import Callable, Generic, Iterator, NamedTuple, TypeVar

from .cursor import Cursor
from .observability import NoOpObserver, QueueObserver


T = TypeVar("T")


class EmptyBufferError(Exception):
    pass


class Slot(NamedTuple):
    index: int
    value: object
    live: bool


class RingQueue(Generic[T]):
    """Fixed-capacity FIFO that overwrites its oldest element when full.

    Logical position ``i`` lives at physical slot ``(start + i) % capacity``.
    Storage is allocated once and never grows.
    """

    __slots__ = ("_buf", "_cap", "_start", "_count", "_observer")

    def __init__(
        self,
        capacity: int,
        factory: Callable[[], T] | None = None,
        observer: QueueObserver | None = None,
    ) -> None:
        if isinstance(capacity, bool):
            raise ValueError("capacity must be an int, got bool")
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise ValueError(f"capacity must be an int, got {type(capacity).__name__}") from None
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        if factory is None:
            self._buf: list[T | None] = [None] * capacity
        else:
            self._buf = [factory() for _ in range(capacity)]
        self._cap = capacity
        self._start = 0
        self._count = 0
        self._observer = observer if observer is not None else NoOpObserver()

    def _slot(self, offset: int) -> int:
        return (self._start + offset) % self._cap

    def front(self) -> T:
        if self._count == 0:
            raise EmptyBufferError("front() on empty queue")
        return self._buf[self._start]  # type: ignore

    def back(self) -> T:
        if self._count == 0:
            raise EmptyBufferError("back() on empty queue")
        return self._buf[self._slot(self._count - 1)]  # type: ignore

    def push_back(self, value: T) -> None:
        if self._count < self._cap:
            self._buf[self._slot(self._count)] = value
            self._count += 1
        else:
            self._observer.on_evict(self._buf[self._start])
            self._buf[self._start] = value
            self._start = (self._start + 1) % self._cap
        self._observer.on_push(value)

    def pop_front(self) -> T:
        if self._count == 0:
            raise EmptyBufferError("pop_front() on empty queue")
        value = self._buf[self._start]
        self._count -= 1
        self._start = (self._start + 1) % self._cap
        self._observer.on_pop(value)
        return value  # type: ignore

    def size(self) -> int:
        return self._count

    def capacity(self) -> int:
        return self._cap

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._cap

    def begin(self) -> Cursor[T]:
        return Cursor(self, 0)

    def end(self) -> Cursor[T]:
        # Past-the-end sentinel, never dereferenced.
        return Cursor(self, self._count)

    def dump(self) -> list[Slot]:
        """Debug view of every physical slot, stale ones included."""
        slots = []
        for index, value in enumerate(self._buf):
            live = (index - self._start) % self._cap < self._count
            slots.append(Slot(index=index, value=value, live=live))
        return slots

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        it = self.begin()
        stop = self.end()
        while it != stop:
            yield it.deref()
            it.advance()

    def __repr__(self) -> str:
        return f"RingQueue(capacity={self._cap}, items={list(self)!r})"
