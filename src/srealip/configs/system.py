from typing import Literal

from pydantic import BaseModel, Field

RealIPMode = Literal["secure", "naive"]


class ProxyConfig(BaseModel):
    """Reverse-proxy header handling."""

    mode: RealIPMode = Field(
        default="secure",
        description="Selection strategy used by get_real_ip: secure or naive",
    )
    forwarded_for_header: str = Field(
        default="X-Forwarded-For",
        description="Multi-value header carrying the forwarded address chain",
    )
    real_ip_header: str = Field(
        default="X-Real-IP",
        description="Single-value header set by the nearest proxy",
    )
    # Proxies append to one comma-joined value; split it into hops.
    split_comma_joined: bool = Field(
        default=True,
        description="Split each forwarded header instance on commas",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Root log level")
    json_output: bool = Field(
        default=True,
        description="Emit JSON lines (True) or human-readable logs (False)",
    )
