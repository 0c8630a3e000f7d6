"""Tests for event classification and summaries."""

from __future__ import annotations

import pytest

from ozon_relay.dispatcher import (
    SUMMARIZERS,
    MessageType,
    classify,
    dispatch_event,
    summarize_new_posting,
    summarize_order_status,
    summarize_unknown,
)
from ozon_relay.errors import MalformedEventError, MissingParameterError, UnknownEventTypeError

from conftest import RecordingNotifier


class TestClassify:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("TYPE_PING", MessageType.PING),
            ("TYPE_NEW_POSTING", MessageType.NEW_POSTING),
            ("ORDER_STATUS_UPDATED", MessageType.ORDER_STATUS_UPDATED),
            ("STOCK_LEVEL_UPDATED", MessageType.STOCK_LEVEL_UPDATED),
            ("PRICE_UPDATED", MessageType.PRICE_UPDATED),
            ("TYPE_CHAT_NEW_MESSAGE", MessageType.UNKNOWN),
            (42, MessageType.UNKNOWN),
        ],
    )
    def test_classify(self, raw, expected):
        assert classify({"message_type": raw}) is expected

    def test_every_relayable_type_has_a_summarizer(self):
        relayable = set(MessageType) - {MessageType.PING, MessageType.UNKNOWN}
        assert set(SUMMARIZERS) == relayable


class TestSummaries:
    def test_product_without_sku_uses_placeholder(self):
        text = summarize_new_posting(
            {"posting_number": "1-1", "products": [{"quantity": 3}]}
        )
        assert "Products: SKU: N/A, Quantity: 3" in text

    def test_empty_posting_number_is_missing(self):
        with pytest.raises(MissingParameterError):
            summarize_new_posting({"posting_number": "", "products": []})

    def test_booleans_render_as_json(self):
        text = summarize_order_status(
            {"message_type": "ORDER_STATUS_UPDATED", "data": {"order_id": 5, "status": True}}
        )
        assert text == "Order status updated: Order ID 5, new status: true"

    def test_non_object_data_is_malformed(self):
        with pytest.raises(MalformedEventError, match="no data object"):
            summarize_order_status({"message_type": "ORDER_STATUS_UPDATED", "data": "oops"})

    def test_unknown_keeps_non_ascii(self):
        text = summarize_unknown({"message_type": "X", "note": "заказ"})
        assert text == 'Unknown event received: {"message_type":"X","note":"заказ"}'


class TestDispatchEvent:
    @pytest.mark.asyncio
    async def test_sends_summary(self):
        notifier = RecordingNotifier()
        event = {"message_type": "PRICE_UPDATED", "data": {"product_id": 9, "price": 10.5}}

        result = await dispatch_event(event, notifier)

        assert result is MessageType.PRICE_UPDATED
        assert notifier.sent == ["Price updated: Product ID 9, new price: 10.5"]

    @pytest.mark.asyncio
    async def test_validation_precedes_notification(self):
        notifier = RecordingNotifier()

        with pytest.raises(MissingParameterError):
            await dispatch_event({"message_type": "TYPE_NEW_POSTING"}, notifier)

        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_unknown_is_relayed_before_raising(self):
        notifier = RecordingNotifier()

        with pytest.raises(UnknownEventTypeError) as exc_info:
            await dispatch_event({"message_type": "FOO"}, notifier)

        assert exc_info.value.message_type == "FOO"
        assert notifier.sent == ['Unknown event received: {"message_type":"FOO"}']

    @pytest.mark.asyncio
    async def test_ping_is_not_dispatched(self):
        with pytest.raises(ValueError):
            await dispatch_event({"message_type": "TYPE_PING"}, RecordingNotifier())
