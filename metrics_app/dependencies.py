"""
FastAPI dependencies for dependency injection.

The storage backend is created once in the application lifespan and kept on
app.state, so each app instance owns its own Counter Set and pool.

Pattern: Dependency Injection
- Handlers never reach for module-level state
- Easy to test (build an app with a different storage)
"""

from fastapi import Depends, Request

from metrics_app.services.metrics_service import MetricsService
from metrics_app.storage.strategies import MetricsStorageStrategy


def get_storage(request: Request) -> MetricsStorageStrategy:
    """Storage selected for the application serving this request"""
    return request.app.state.storage


def get_metrics_service(
    storage: MetricsStorageStrategy = Depends(get_storage)
) -> MetricsService:
    """
    Get MetricsService with the storage strategy injected.

    - Controller depends on service
    - Service depends on storage
    """
    return MetricsService(storage=storage)
