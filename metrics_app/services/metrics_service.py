from metrics_app.config import logger
from metrics_app.schemas.metrics import MetricsSnapshot
from metrics_app.storage.strategies import MetricsStorageStrategy


class EmailRequiredError(ValueError):
    """Signup attempted without a usable email"""


class MetricsService:
    """
    Metrics service with the storage strategy injected.

    Holds the little logic the endpoints have (validation, best-effort
    page views) so routes only translate results into responses.
    """

    def __init__(self, storage: MetricsStorageStrategy):
        self.storage = storage

    async def track_page_view(self) -> bool:
        """
        Record a homepage view without ever failing the request.

        Returns:
            True if the view was stored, False if storage raised
        """
        try:
            await self.storage.record_page_view()
        except Exception as e:
            logger.warning(f"Page view not recorded: {e}")
            return False
        return True

    async def register_click(self) -> int:
        """Record a click and return the click total read right after it"""
        await self.storage.record_click()
        return await self.storage.count_clicks()

    async def register_signup(self, email: str) -> str:
        """
        Store a signup.

        Raises:
            EmailRequiredError: email is empty after trimming
        """
        email = (email or "").strip()
        if not email:
            raise EmailRequiredError("Email required")
        await self.storage.record_signup(email)
        return email

    async def snapshot(self) -> MetricsSnapshot:
        return await self.storage.get_metrics()
