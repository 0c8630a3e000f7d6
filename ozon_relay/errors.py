"""Error codes and exceptions shared by the event pipeline."""

import json
from enum import Enum


class ErrorCode(str, Enum):
    PARAMETER_VALUE_MISSED = "ERROR_PARAMETER_VALUE_MISSED"
    UNKNOWN_EVENT_TYPE = "ERROR_UNKNOWN_EVENT_TYPE"
    UNKNOWN = "ERROR_UNKNOWN"


class EventError(Exception):
    """A sender-correctable problem with an inbound event.

    Carries everything the ingress handler needs to build the error response.
    """

    code = ErrorCode.UNKNOWN
    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class MissingParameterError(EventError):
    code = ErrorCode.PARAMETER_VALUE_MISSED
    status_code = 400


class UnknownEventTypeError(EventError):
    code = ErrorCode.UNKNOWN_EVENT_TYPE
    status_code = 400

    def __init__(self, message_type):
        super().__init__(f"Unknown event type: {message_type}")
        self.message_type = message_type


class MalformedEventError(Exception):
    """A typed event is missing data its summary depends on (internal fault)."""


class NotificationError(Exception):
    """The downstream webhook could not be delivered to."""


def error_details(exc: BaseException) -> str:
    """Message text of an exception, falling back to its class name."""
    return str(exc) or type(exc).__name__


def parse_feishu_error(response_text: str) -> str:
    """Extract a readable message from a Feishu bot error response.

    Feishu returns JSON like {"code": 19001, "msg": "param invalid", "data": {}}.
    Returns "code: msg" when parseable, raw text otherwise.
    """
    try:
        body = json.loads(response_text)
        code = body.get("code")
        msg = body.get("msg", "")
        if msg:
            return f"{code}: {msg}" if code is not None else msg
    except Exception:
        pass
    return response_text
