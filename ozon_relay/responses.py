"""Response payloads returned to Ozon."""

from datetime import datetime, timezone

from pydantic import BaseModel

from ozon_relay.config import APP_NAME, APP_VERSION
from ozon_relay.errors import ErrorCode


class ErrorBody(BaseModel):
    code: ErrorCode
    message: str
    details: str | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


class PingResponse(BaseModel):
    version: str
    name: str
    time: str


class SuccessResponse(BaseModel):
    result: bool = True


def format_utc_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_error_response(code: ErrorCode, message: str, details: str | None = None) -> ErrorResponse:
    return ErrorResponse(error=ErrorBody(code=code, message=message, details=details))


def build_ping_response(now: datetime | None = None) -> PingResponse:
    """Identity acknowledgement for a TYPE_PING probe, stamped with the current time."""
    now = now or datetime.now(timezone.utc)
    return PingResponse(version=APP_VERSION, name=APP_NAME, time=format_utc_timestamp(now))


def build_success_response() -> SuccessResponse:
    return SuccessResponse(result=True)
