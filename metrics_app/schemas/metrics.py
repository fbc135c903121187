import json

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, List, Optional


class MetricsSnapshot(BaseModel):
    """Counter Set as read from a storage backend.

    `emails` is only populated by the in-memory store; the relational store
    leaves it as None so it drops out of the serialized response.
    """
    page_views: int = Field(0, alias="pageViews")
    clicks: int = 0
    signups: int = 0
    emails: Optional[List[str]] = None
    db: bool = False

    model_config = ConfigDict(populate_by_name=True)

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class PingResponse(BaseModel):
    ok: bool = True
    message: str


class ClickResponse(BaseModel):
    ok: bool = True
    total_clicks: int = Field(..., alias="totalClicks")

    model_config = ConfigDict(populate_by_name=True)


class SignupRequest(BaseModel):
    """Signup body. Anything falsy or missing becomes an empty email."""
    email: str = ""

    @field_validator("email", mode="before")
    @classmethod
    def coerce_email(cls, value: Any) -> str:
        if not value:
            return ""
        if isinstance(value, (bool, int, float)):
            # JSON spelling: true, not True
            value = json.dumps(value)
        return str(value).strip()


class SignupResponse(BaseModel):
    ok: bool = True
    message: str


class ErrorResponse(BaseModel):
    ok: bool = False
    error: Optional[str] = None
    message: Optional[str] = None
