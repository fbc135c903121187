from .metrics import (
    MetricsSnapshot,
    PingResponse,
    ClickResponse,
    SignupRequest,
    SignupResponse,
    ErrorResponse,
)

__all__ = [
    "MetricsSnapshot",
    "PingResponse",
    "ClickResponse",
    "SignupRequest",
    "SignupResponse",
    "ErrorResponse",
]
