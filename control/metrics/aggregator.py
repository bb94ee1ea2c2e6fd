from typing import Any, NamedTuple


class Snapshot(NamedTuple):
    pushes: int
    pops: int
    evictions: int


class Metrics:
    """Counts queue activity; plugs into RingQueue as its observer."""
    __slots__ = ("_pushes", "_pops", "_evictions")

    def __init__(self) -> None:
        self._pushes = 0
        self._pops = 0
        self._evictions = 0

    def on_push(self, value: Any) -> None:
        self._pushes += 1

    def on_evict(self, value: Any) -> None:
        self._evictions += 1

    def on_pop(self, value: Any) -> None:
        self._pops += 1

    def snapshot(self) -> Snapshot:
        return Snapshot(
            pushes=self._pushes,
            pops=self._pops,
            evictions=self._evictions,
        )

    def reset(self) -> Snapshot:
        s = self.snapshot()
        self._pushes = 0
        self._pops = 0
        self._evictions = 0
        return s
