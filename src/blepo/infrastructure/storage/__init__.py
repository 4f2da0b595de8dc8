"""Local persistence for watched state."""

from blepo.infrastructure.storage.json_store import JsonWatchedStore

__all__ = ["JsonWatchedStore"]
