"""Ozon push notification endpoint - acknowledges events and relays them to chat."""

import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from ozon_relay.dependencies import get_notifier
from ozon_relay.dispatcher import MessageType, dispatch_event
from ozon_relay.errors import ErrorCode, EventError, MissingParameterError, error_details
from ozon_relay.notifiers import BaseNotifier
from ozon_relay.responses import (
    ErrorResponse,
    SuccessResponse,
    build_error_response,
    build_ping_response,
    build_success_response,
)


logger = logging.getLogger(__name__)
router = APIRouter()


async def _read_event(request: Request) -> dict:
    """Parse the request body; anything but a JSON object counts as an untyped event."""
    try:
        event = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Request body is not valid JSON")
        return {}
    if not isinstance(event, dict):
        logger.warning(f"Request body is not a JSON object: {type(event).__name__}")
        return {}
    return event


async def _mirror_error(notifier: BaseNotifier, code: ErrorCode, message: str, details: str | None):
    """Relay an error to chat after the response has gone out. Never raises."""
    try:
        await notifier.notify_error(code.value, message, details)
    except Exception as e:
        logger.warning(f"Failed to mirror {code.value} to {notifier.channel_name}: {error_details(e)}")


def _error_response(
    background_tasks: BackgroundTasks,
    notifier: BaseNotifier,
    code: ErrorCode,
    message: str,
    details: str | None,
    status_code: int,
) -> JSONResponse:
    background_tasks.add_task(_mirror_error, notifier, code, message, details)
    body = build_error_response(code, message, details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.post(
    "/events",
    responses={
        200: {"model": SuccessResponse, "description": "Event relayed, or PingResponse for TYPE_PING"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def receive_event(
    request: Request,
    background_tasks: BackgroundTasks,
    notifier: BaseNotifier = Depends(get_notifier),
):
    """Receive an Ozon event notification.

    Pings are answered with the receiver's identity. Other events are
    summarized and relayed downstream before {"result": true} is returned.
    Failures come back as {"error": {...}} and are mirrored to chat.
    """
    try:
        event = await _read_event(request)
        logger.info(f"Received event from Ozon: {event}")

        if not event.get("message_type"):
            raise MissingParameterError("Missing required parameter: message_type")

        if event["message_type"] == MessageType.PING.value:
            logger.info(f"Received PING from Ozon at {event.get('time')}")
            return build_ping_response()

        await dispatch_event(event, notifier)

    except EventError as e:
        logger.warning(f"Rejected event: {e.code.value}: {e.message}")
        return _error_response(background_tasks, notifier, e.code, e.message, e.details, e.status_code)
    except Exception as e:
        logger.exception("Error processing event")
        return _error_response(
            background_tasks,
            notifier,
            ErrorCode.UNKNOWN,
            "An unknown error occurred",
            error_details(e),
            500,
        )

    return build_success_response()
