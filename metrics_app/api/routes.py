from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from metrics_app.config import logger
from metrics_app.dependencies import get_metrics_service
from metrics_app.schemas.metrics import (
    ClickResponse,
    ErrorResponse,
    PingResponse,
    SignupRequest,
    SignupResponse,
)
from metrics_app.services.metrics_service import EmailRequiredError, MetricsService

router = APIRouter(prefix="/api", tags=["metrics"])

SIGNUP_THANKS = "Thanks! You’re on the list."


def storage_error(exc: Exception) -> JSONResponse:
    """500 response exposing the storage error message"""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "error": str(exc)},
    )


async def read_signup(request: Request) -> SignupRequest:
    """
    Parse the signup body leniently.

    Only application/json bodies are read. A missing, malformed, too deeply
    nested or non-object body counts as a missing email, which the service
    then rejects with 400.
    """
    payload = {}
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            payload = await request.json()
        except (ValueError, RecursionError):
            payload = {}
    if not isinstance(payload, dict):
        payload = {}
    return SignupRequest.model_validate(payload)


@router.get("/ping", response_model=PingResponse)
async def ping():
    """Liveness check, never touches storage"""
    return PingResponse(message="Server is alive ✅")


@router.post(
    "/click",
    response_model=ClickResponse,
    responses={500: {"model": ErrorResponse}},
)
async def click(service: MetricsService = Depends(get_metrics_service)):
    """Record a click and report the running total"""
    try:
        total = await service.register_click()
    except Exception as e:
        logger.error(f"Click failed: {e}")
        return storage_error(e)
    return ClickResponse(total_clicks=total)


@router.post(
    "/signup",
    response_model=SignupResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def signup(
    request: Request,
    service: MetricsService = Depends(get_metrics_service)
):
    body = await read_signup(request)
    try:
        await service.register_signup(body.email)
    except EmailRequiredError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"ok": False, "message": str(e)},
        )
    except Exception as e:
        logger.error(f"Signup failed: {e}")
        return storage_error(e)
    return SignupResponse(message=SIGNUP_THANKS)


@router.get("/metrics", responses={500: {"model": ErrorResponse}})
async def metrics(service: MetricsService = Depends(get_metrics_service)):
    """
    Aggregate counts from the active backend.

    The in-memory backend also lists signup emails; the relational one
    does not (its response has no "emails" key).
    """
    try:
        snapshot = await service.snapshot()
    except Exception as e:
        logger.error(f"Metrics read failed: {e}")
        return storage_error(e)
    return snapshot.to_response()
