from .metrics_service import MetricsService, EmailRequiredError

__all__ = ["MetricsService", "EmailRequiredError"]
