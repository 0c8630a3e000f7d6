"""Ozon Event Relay - FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI

from ozon_relay.config import APP_NAME, APP_VERSION, Settings, settings
from ozon_relay.notifiers import BaseNotifier, FeishuNotifier
from ozon_relay.routers import events, health


logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None, notifier: BaseNotifier | None = None) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title=APP_NAME,
        description="Receives Ozon seller notifications and relays them to a Feishu chat",
        version=APP_VERSION,
    )

    app.state.settings = app_settings
    app.state.notifier = notifier or FeishuNotifier(
        app_settings.feishu_webhook_url, timeout=app_settings.notify_timeout
    )

    # Routers (no auth: Ozon push notifications are unsigned)
    app.include_router(health.router)
    app.include_router(events.router, prefix="/ozon", tags=["ozon"])

    return app


app = create_app()


def run():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server is running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
