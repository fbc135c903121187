"""
Storage module for the Counter Set.

Implements the Strategy Pattern so handlers never check which backend is active.
"""

from .strategies import MetricsStorageStrategy, InMemoryMetricsStorage, SQLMetricsStorage
from .factory import StorageFactory, StorageBackend

__all__ = [
    "MetricsStorageStrategy",
    "InMemoryMetricsStorage",
    "SQLMetricsStorage",
    "StorageFactory",
    "StorageBackend",
]
