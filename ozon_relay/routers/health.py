from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ozon_relay.config import APP_NAME, APP_VERSION, Settings
from ozon_relay.dependencies import get_settings


router = APIRouter(tags=["health"])

_startup_time = datetime.now(timezone.utc)


class EndpointInfo(BaseModel):
    path: str
    description: str


class HealthResponse(BaseModel):
    status: str
    name: str
    version: str
    uptime_seconds: float
    endpoints: list[EndpointInfo]


class IntegrationStatus(BaseModel):
    configured: bool
    status: str
    timeout_seconds: float | None = None


class IntegrationsResponse(BaseModel):
    feishu: IntegrationStatus


ENDPOINTS = [
    EndpointInfo(path="/health", description="Service status and API directory"),
    EndpointInfo(path="/health/integrations", description="Downstream webhook configuration"),
    EndpointInfo(path="/ozon/events", description="Ozon push notifications, relayed to Feishu"),
]


def _check_feishu(settings: Settings) -> IntegrationStatus:
    # Startup already refuses a missing URL; this only reports it
    if not settings.feishu_webhook_url:
        return IntegrationStatus(configured=False, status="webhook url not configured")
    return IntegrationStatus(configured=True, status="ok", timeout_seconds=settings.notify_timeout)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    uptime = (datetime.now(timezone.utc) - _startup_time).total_seconds()

    return HealthResponse(
        status="ok",
        name=APP_NAME,
        version=APP_VERSION,
        uptime_seconds=round(uptime, 2),
        endpoints=ENDPOINTS,
    )


@router.get("/health/integrations", response_model=IntegrationsResponse)
async def get_integrations(settings: Settings = Depends(get_settings)):
    return IntegrationsResponse(feishu=_check_feishu(settings))
