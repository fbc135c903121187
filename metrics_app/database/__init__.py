from .connection import Base, build_async_url, create_engine_for

__all__ = ["Base", "build_async_url", "create_engine_for"]
