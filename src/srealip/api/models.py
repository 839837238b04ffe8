"""Pydantic models for the IP diagnostic API."""

from pydantic import BaseModel, Field

from srealip.configs.system import RealIPMode


class IPResponse(BaseModel):
    """Client address as seen by each selection strategy."""

    ip: str = Field(description="Address chosen by the configured mode")
    mode: RealIPMode = Field(description="Configured selection mode")
    secure: str = Field(description="Result of the secure (right-to-left) strategy")
    naive: str = Field(description="Result of the naive (X-Real-IP first) strategy")
    remote_addr: str = Field(description="Raw transport peer address")


class HealthResponse(BaseModel):
    status: str = "ok"
