"""Real client IP selection from forwarded-header chains.

Two strategies are provided:

1. ``secure_real_ip`` — scans ``X-Forwarded-For`` right-to-left and
   returns the first public address.  Trustworthy only when the service
   sits behind infrastructure-controlled reverse proxies (e.g. AWS
   ELB/ALB) that append to, rather than forward, the header.
2. ``naive_real_ip`` — prefers ``X-Real-IP``, then scans
   ``X-Forwarded-For`` left-to-right.  Closer to the original client
   but trivially spoofable; use it for display or analytics only.

Both fall back to the host part of the transport peer address when no
forwarded value qualifies.  Inputs are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .classifier import is_private_ip, parse_ip

logger = logging.getLogger(__name__)


def split_host_port(hostport: str) -> tuple[str, str]:
    """Split ``host:port`` or ``[host]:port`` into ``(host, port)``.

    Raises:
        ValueError: when *hostport* is not a well-formed host:port pair.
    """
    i = hostport.rfind(":")
    if i < 0:
        raise ValueError(f"missing port in address: {hostport!r}")

    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise ValueError(f"missing ']' in address: {hostport!r}")
        if end + 1 == len(hostport):
            raise ValueError(f"missing port in address: {hostport!r}")
        if end + 1 != i:
            # Either "[host]x:port" or "[host]:a:b".
            if hostport[end + 1] == ":":
                raise ValueError(f"too many colons in address: {hostport!r}")
            raise ValueError(f"missing port in address: {hostport!r}")
        host = hostport[1:end]
        rest = hostport[end + 1 :]
        if "[" in hostport[1:] or "]" in rest:
            raise ValueError(f"unexpected bracket in address: {hostport!r}")
    else:
        host = hostport[:i]
        if ":" in host:
            raise ValueError(f"too many colons in address: {hostport!r}")
        if "[" in hostport or "]" in hostport:
            raise ValueError(f"unexpected bracket in address: {hostport!r}")

    return host, hostport[i + 1 :]


def extract_ip_from_remote_addr(remote_addr: str) -> str:
    """Return *remote_addr* trimmed and without its port.

    Bare hosts are returned as-is.  A malformed ``host:port`` value is
    returned unchanged rather than raising.
    """
    address = remote_addr.strip()
    if ":" not in address:
        return address
    try:
        host, _ = split_host_port(address)
    except ValueError:
        logger.debug("Unsplittable remote address %r, using it verbatim", address)
        return address
    return host


def _first_public(candidates: Iterable[str]) -> str | None:
    for value in candidates:
        ip = parse_ip(value)
        if ip is None or is_private_ip(ip):
            continue
        return str(ip)
    return None


def secure_real_ip(forwarded_for: Sequence[str], remote_addr: str) -> str:
    """Return the rightmost public ``X-Forwarded-For`` address.

    Unparseable and private entries are skipped.  When none remains the
    host part of *remote_addr* is returned unfiltered.
    """
    ip = _first_public(reversed(forwarded_for))
    if ip is not None:
        return ip

    logger.debug("No public X-Forwarded-For entry, falling back to remote address")
    return extract_ip_from_remote_addr(remote_addr)


def naive_real_ip(
    real_ip: str, forwarded_for: Sequence[str], remote_addr: str
) -> str:
    """Return ``X-Real-IP`` if public, else the leftmost public forwarded entry.

    *real_ip* must already be reduced to the first received header value.
    """
    ip = _first_public((real_ip,)) if real_ip else None
    if ip is not None:
        return ip

    ip = _first_public(forwarded_for)
    if ip is not None:
        return ip

    logger.debug("No public forwarded address, falling back to remote address")
    return extract_ip_from_remote_addr(remote_addr)
