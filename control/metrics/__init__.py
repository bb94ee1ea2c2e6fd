from .aggregator import Metrics, Snapshot

__all__ = ["Metrics", "Snapshot"]
