"""
Factory for creating metrics storage instances.

Picks the backend once at startup from settings. A relational backend that
fails to bootstrap is replaced with the in-memory one for the rest of the
process; there is no retry.
"""

from enum import Enum
from typing import Optional

from .strategies import MetricsStorageStrategy, InMemoryMetricsStorage, SQLMetricsStorage
from metrics_app.config import Settings, settings as default_settings, logger
from metrics_app.database.connection import create_engine_for


class StorageBackend(Enum):
    """Available metrics storage backends"""
    MEMORY = "memory"
    SQL = "sql"


class StorageFactory:
    """
    Simple factory for creating storage instances.

    Unlike a singleton, every call returns a fresh instance; the application
    that asked for it owns it (and closes it on shutdown).
    """

    @staticmethod
    def backend_for(config: Settings) -> StorageBackend:
        """An empty DATABASE_URL selects the in-memory store"""
        return StorageBackend.SQL if config.database_url else StorageBackend.MEMORY

    @classmethod
    async def create(cls, config: Optional[Settings] = None) -> MetricsStorageStrategy:
        """
        Create and bootstrap the storage backend described by settings.

        Args:
            config: Settings to read from (module settings by default)

        Returns:
            Ready-to-use storage instance
        """
        config = config or default_settings
        backend = cls.backend_for(config)

        if backend == StorageBackend.MEMORY:
            logger.info("No DATABASE_URL set, using in-memory storage")
            return InMemoryMetricsStorage()

        if backend == StorageBackend.SQL:
            storage = None
            try:
                storage = SQLMetricsStorage(create_engine_for(config.database_url, echo=config.debug))
                await storage.bootstrap()
            except Exception as e:
                logger.error(f"DB init error: {e}")
                if storage is not None:
                    await storage.close()
                logger.warning("Falling back to in-memory storage")
                return InMemoryMetricsStorage()
            logger.info("Relational storage initialized")
            return storage

        raise ValueError(f"Unknown storage backend: {backend}")
