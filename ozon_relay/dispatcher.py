"""Event classification - turns an Ozon event into a chat notification."""

import json
import logging
from enum import Enum
from typing import Any, Callable

from ozon_relay.errors import MalformedEventError, MissingParameterError, UnknownEventTypeError
from ozon_relay.notifiers import BaseNotifier


logger = logging.getLogger(__name__)

PLACEHOLDER = "N/A"


class MessageType(str, Enum):
    PING = "TYPE_PING"
    NEW_POSTING = "TYPE_NEW_POSTING"
    ORDER_STATUS_UPDATED = "ORDER_STATUS_UPDATED"
    STOCK_LEVEL_UPDATED = "STOCK_LEVEL_UPDATED"
    PRICE_UPDATED = "PRICE_UPDATED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


def _render(value: Any) -> str:
    """Render a payload value the way it reads in the JSON body."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _data_fields(event: dict, *names: str) -> list[str]:
    data = event.get("data")
    if not isinstance(data, dict):
        raise MalformedEventError(f"{event.get('message_type')} event has no data object")
    missing = [name for name in names if data.get(name) is None]
    if missing:
        raise MalformedEventError(
            f"{event.get('message_type')} event data is missing: {', '.join(missing)}"
        )
    return [_render(data[name]) for name in names]


def summarize_new_posting(event: dict) -> str:
    if not event.get("posting_number") or event.get("products") is None:
        raise MissingParameterError("Missing required parameters: posting_number or products")

    products = ", ".join(
        f"SKU: {_render(product.get('sku'))}, Quantity: {_render(product.get('quantity'))}"
        for product in event["products"]
    )
    return (
        "New Posting Received:\n"
        f"Posting Number: {_render(event['posting_number'])}\n"
        f"Products: {products}\n"
        f"In Process At: {_render(event.get('in_process_at'))}\n"
        f"Warehouse ID: {_render(event.get('warehouse_id'))}\n"
        f"Seller ID: {_render(event.get('seller_id'))}"
    )


def summarize_order_status(event: dict) -> str:
    order_id, status = _data_fields(event, "order_id", "status")
    return f"Order status updated: Order ID {order_id}, new status: {status}"


def summarize_stock_level(event: dict) -> str:
    product_id, stock = _data_fields(event, "product_id", "stock")
    return f"Stock level updated: Product ID {product_id}, new stock: {stock}"


def summarize_price(event: dict) -> str:
    product_id, price = _data_fields(event, "product_id", "price")
    return f"Price updated: Product ID {product_id}, new price: {price}"


def summarize_unknown(event: dict) -> str:
    return f"Unknown event received: {json.dumps(event, ensure_ascii=False, separators=(',', ':'))}"


# Every MessageType except PING and UNKNOWN must appear here
SUMMARIZERS: dict[MessageType, Callable[[dict], str]] = {
    MessageType.NEW_POSTING: summarize_new_posting,
    MessageType.ORDER_STATUS_UPDATED: summarize_order_status,
    MessageType.STOCK_LEVEL_UPDATED: summarize_stock_level,
    MessageType.PRICE_UPDATED: summarize_price,
}


def classify(event: dict) -> MessageType:
    return MessageType(event.get("message_type"))


async def dispatch_event(event: dict, notifier: BaseNotifier) -> MessageType:
    """Validate a non-ping event, summarize it and send the summary downstream.

    Unknown event types are still relayed (as a raw dump) before
    UnknownEventTypeError is raised, so nothing Ozon sends goes unseen.
    """
    message_type = classify(event)

    if message_type is MessageType.PING:
        raise ValueError("Ping events are acknowledged by the ingress handler, not dispatched")

    if message_type is MessageType.UNKNOWN:
        logger.warning(f"Unknown event type: {event.get('message_type')!r}")
        await notifier.notify(summarize_unknown(event))
        raise UnknownEventTypeError(event.get("message_type"))

    text = SUMMARIZERS[message_type](event)
    await notifier.notify(text)
    logger.info(f"Relayed {message_type.value} event via {notifier.channel_name}")
    return message_type
