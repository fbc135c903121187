"""
Async database engine setup.

The engine owns the connection pool; one engine is created per
SQLMetricsStorage and disposed when the application shuts down.
"""

import ssl
from typing import Any, Dict, Optional

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from metrics_app.config import requires_relaxed_tls


class Base(DeclarativeBase):
    """Declarative base for the counter tables"""


def build_async_url(database_url: str) -> URL:
    """
    Turn a plain connection string into an async SQLAlchemy URL.

    postgres:// and postgresql:// are pointed at asyncpg. The libpq-only
    sslmode parameter is dropped, TLS is configured through connect_args.
    Anything else (e.g. sqlite+aiosqlite://) is used as given.
    """
    url = make_url(database_url)
    if url.drivername in ("postgres", "postgresql", "postgresql+psycopg2"):
        url = url.set(drivername="postgresql+asyncpg")
    if "sslmode" in url.query:
        url = url.difference_update_query(["sslmode"])
    return url


def relaxed_ssl_context() -> ssl.SSLContext:
    """TLS context that encrypts but does not validate the server certificate"""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def build_connect_args(database_url: str, url: Optional[URL] = None) -> Dict[str, Any]:
    url = url or build_async_url(database_url)
    if not url.drivername.startswith("postgresql"):
        return {}
    if requires_relaxed_tls(database_url):
        return {"ssl": relaxed_ssl_context()}
    return {}


def create_engine_for(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine (and its pool) for the given connection string.

    No connection is opened here; the first query does that.
    """
    url = build_async_url(database_url)
    return create_async_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        connect_args=build_connect_args(database_url, url),
        echo=echo,
    )
