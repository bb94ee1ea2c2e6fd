from .cursor import Cursor
from .observability import LoggingObserver, NoOpObserver, QueueObserver
from .queue import EmptyBufferError, RingQueue, Slot

__all__ = [
    "Cursor",
    "EmptyBufferError",
    "LoggingObserver",
    "NoOpObserver",
    "QueueObserver",
    "RingQueue",
    "Slot",
]
