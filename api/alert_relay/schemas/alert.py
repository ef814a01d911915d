"""Pydantic schemas for the relay's JSON responses."""

from typing import Optional

from pydantic import BaseModel, Field


class EndpointList(BaseModel):
    tradingview: str = "POST /webhook/tradingview"
    mt5: str = "POST /webhook/mt5"
    generic: str = "POST /webhook"
    test: str = "GET /test"


class ServiceStatus(BaseModel):
    status: str = "ok"
    message: str
    endpoints: EndpointList = Field(default_factory=EndpointList)


class HealthStatus(BaseModel):
    status: str = "ok"


class SendResult(BaseModel):
    success: bool = True
    message: Optional[str] = Field(None, description="Human-readable outcome, set by /test")


class ErrorResponse(BaseModel):
    error: str
