"""Real client IP extraction for reverse-proxy deployments.

This module is the boundary between Starlette requests and the pure
selectors in ``srealip.selector``.  It fixes the header contract:

* ``X-Forwarded-For`` — **every** received instance, in receipt order.
  Each instance is split on commas (configurable), since proxies append
  to one comma-joined value.
* ``X-Real-IP`` — the **first** received instance only; later
  duplicates are ignored.  ``""`` when absent.
* ``request.client`` — formatted as ``host:port`` (``[v6]:port``).

All three dependencies are usable as FastAPI dependencies::

    real_ip: str = Depends(get_real_ip)
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request
from starlette.datastructures import Address, Headers

from srealip.configs.config import get_proxy_config
from srealip.configs.system import ProxyConfig
from srealip.selector import naive_real_ip, secure_real_ip

logger = logging.getLogger(__name__)

_FORWARDED_SEPARATOR = ","


def forwarded_for_values(
    headers: Headers, header_name: str, split_comma_joined: bool = True
) -> list[str]:
    """Return all forwarded hops in receipt order.

    Empty pieces are kept; the selectors skip them.
    """
    values = headers.getlist(header_name)
    if not split_comma_joined:
        return list(values)
    hops: list[str] = []
    for value in values:
        hops.extend(value.split(_FORWARDED_SEPARATOR))
    return hops


def first_header_value(headers: Headers, header_name: str) -> str:
    """Return the first instance of *header_name*, or ``""``."""
    values = headers.getlist(header_name)
    return values[0] if values else ""


def remote_addr_from_client(client: Address | None) -> str:
    """Format the transport peer the way a socket reports it."""
    if client is None or not client.host:
        return ""
    host, port = client.host, client.port
    if port is None:
        return host
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def get_secure_real_ip(
    request: Request,
    config: Annotated[ProxyConfig, Depends(get_proxy_config)],
) -> str:
    """Rightmost public forwarded address; see ``secure_real_ip``."""
    return secure_real_ip(
        forwarded_for_values(
            request.headers, config.forwarded_for_header, config.split_comma_joined
        ),
        remote_addr_from_client(request.client),
    )


def get_naive_real_ip(
    request: Request,
    config: Annotated[ProxyConfig, Depends(get_proxy_config)],
) -> str:
    """``X-Real-IP`` first, then leftmost public forwarded address."""
    return naive_real_ip(
        first_header_value(request.headers, config.real_ip_header),
        forwarded_for_values(
            request.headers, config.forwarded_for_header, config.split_comma_joined
        ),
        remote_addr_from_client(request.client),
    )


def get_real_ip(
    request: Request,
    config: Annotated[ProxyConfig, Depends(get_proxy_config)],
) -> str:
    """Extract the client IP using the configured ``proxy.mode``."""
    if config.mode == "naive":
        ip = get_naive_real_ip(request, config)
    else:
        ip = get_secure_real_ip(request, config)
    logger.debug("Resolved real IP %s (mode=%s)", ip, config.mode)
    return ip
