"""
Database models for the relational metrics store.

Each event type gets its own append-only table; counts are COUNT(*) over it.
"""

from .events import PageView, Click, Signup

__all__ = ["PageView", "Click", "Signup"]
