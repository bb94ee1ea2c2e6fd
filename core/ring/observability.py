import logging
from typing import Any, Protocol


logger = logging.getLogger(__name__)


class QueueObserver(Protocol):
    def on_push(self, value: Any) -> None: ...
    def on_evict(self, value: Any) -> None: ...
    def on_pop(self, value: Any) -> None: ...


class NoOpObserver:
    def on_push(self, value: Any) -> None:
        pass

    def on_evict(self, value: Any) -> None:
        pass

    def on_pop(self, value: Any) -> None:
        pass


class LoggingObserver:
    """Reports queue activity through the ``core.ring.observability`` logger."""
    __slots__ = ("_logger",)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log if log is not None else logger

    def on_push(self, value: Any) -> None:
        self._logger.debug("push %r", value)

    def on_evict(self, value: Any) -> None:
        # Overwrites drop data without telling the caller.
        self._logger.info("evict %r", value)

    def on_pop(self, value: Any) -> None:
        self._logger.debug("pop %r", value)
