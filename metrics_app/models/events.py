from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func
from metrics_app.database.connection import Base


class PageView(Base):
    """One row per homepage view"""
    __tablename__ = "pageviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    at = Column(DateTime, server_default=func.now())


class Click(Base):
    """One row per POST /api/click"""
    __tablename__ = "clicks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    at = Column(DateTime, server_default=func.now())


class Signup(Base):
    """
    Signup record.

    Rows are only ever inserted; the email is stored trimmed.
    """
    __tablename__ = "signups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False)
    at = Column(DateTime, server_default=func.now())
