"""
Metrics storage strategies using Strategy Pattern.

Two interchangeable backends hold the Counter Set:
- InMemory: process-lifetime counters, used when no database is configured
- SQL: one append-only table per event type behind an async connection pool
"""

from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from metrics_app.config import logger
from metrics_app.database.connection import Base
from metrics_app.models import PageView, Click, Signup
from metrics_app.schemas.metrics import MetricsSnapshot


class MetricsStorageStrategy(ABC):
    """
    Abstract base class for metrics storage strategies.

    Handlers only talk to this interface, so the backend is picked once at
    startup and never checked again per request.

    All methods are async because the relational backend does network I/O.
    """

    is_persistent: bool = False

    @abstractmethod
    async def record_page_view(self) -> None:
        """Count one homepage view"""
        pass

    @abstractmethod
    async def record_click(self) -> None:
        """Count one click"""
        pass

    @abstractmethod
    async def record_signup(self, email: str) -> None:
        """
        Store a signup.

        Args:
            email: Already trimmed, non-empty email
        """
        pass

    @abstractmethod
    async def count_clicks(self) -> int:
        """Current click total"""
        pass

    @abstractmethod
    async def get_metrics(self) -> MetricsSnapshot:
        """Read all three counts"""
        pass

    async def bootstrap(self) -> None:
        """Prepare the backend for use (no-op unless overridden)"""
        return None

    async def close(self) -> None:
        """Release held resources (no-op unless overridden)"""
        return None


class InMemoryMetricsStorage(MetricsStorageStrategy):
    """
    Counter Set kept on the instance; gone when the process exits.

    Used when DATABASE_URL is empty or the database could not be bootstrapped.
    No method awaits anything, so each increment runs to completion on the
    event loop without interleaving.
    """

    is_persistent = False

    def __init__(self):
        self.page_views = 0
        self.clicks = 0
        self.signups = 0
        self.emails: List[str] = []

    async def record_page_view(self) -> None:
        self.page_views += 1

    async def record_click(self) -> None:
        self.clicks += 1

    async def record_signup(self, email: str) -> None:
        self.signups += 1
        self.emails.append(email)

    async def count_clicks(self) -> int:
        return self.clicks

    async def get_metrics(self) -> MetricsSnapshot:
        return MetricsSnapshot(
            page_views=self.page_views,
            clicks=self.clicks,
            signups=self.signups,
            emails=list(self.emails),
            db=False,
        )


class SQLMetricsStorage(MetricsStorageStrategy):
    """
    Relational storage on top of a SQLAlchemy AsyncEngine.

    Every logical operation is a single statement on a pooled connection.
    No transaction spans more than one statement, so a click followed by
    count_clicks() can observe other requests' clicks in between.

    Errors are not caught here; handlers turn them into 500 responses.
    """

    is_persistent = True

    def __init__(self, engine: AsyncEngine):
        """
        Args:
            engine: Async engine owning the connection pool
        """
        self.engine = engine

    async def bootstrap(self) -> None:
        """Create pageviews, clicks and signups if they don't exist"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        logger.info("DB ready")

    async def close(self) -> None:
        await self.engine.dispose()

    async def _insert(self, statement) -> None:
        async with self.engine.begin() as conn:
            await conn.execute(statement)

    async def _count(self, model) -> int:
        async with self.engine.connect() as conn:
            result = await conn.execute(select(func.count()).select_from(model))
            return int(result.scalar_one())

    async def record_page_view(self) -> None:
        await self._insert(insert(PageView))

    async def record_click(self) -> None:
        await self._insert(insert(Click))

    async def record_signup(self, email: str) -> None:
        await self._insert(insert(Signup).values(email=email))

    async def count_clicks(self) -> int:
        return await self._count(Click)

    async def get_metrics(self) -> MetricsSnapshot:
        page_views = await self._count(PageView)
        clicks = await self._count(Click)
        signups = await self._count(Signup)
        return MetricsSnapshot(
            page_views=page_views,
            clicks=clicks,
            signups=signups,
            db=True,
        )
