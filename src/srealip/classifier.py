"""Address classification for forwarded-header candidates.

An address counts as *private* when it can never identify a public
internet client:

* loopback (``127.0.0.0/8``, ``::1``)
* link-local unicast (``169.254.0.0/16``, ``fe80::/10``)
* link-local multicast (``224.0.0.0/24``, ``ffX2::/16``)
* private ranges (``10/8``, ``172.16/12``, ``192.168/16``, ``fc00::/7``)
* RFC 6598 shared address space (``100.64.0.0/10``)

Pure functions; no state and no I/O.
"""

from __future__ import annotations

import ipaddress
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
)
_IPV4_LINK_LOCAL_MULTICAST = ipaddress.ip_network("224.0.0.0/24")

_SHARED_SPACE_FIRST_OCTET = 100
_SHARED_SPACE_MASK = 0xC0
_SHARED_SPACE_PREFIX = 0x40

_ZONE_SEPARATOR = "%"


def parse_ip(value: str) -> IPAddress | None:
    """Parse *value* as an IP literal, or return ``None``.

    IPv4-mapped IPv6 addresses (``::ffff:1.2.3.4``) are unwrapped to
    their IPv4 form.  Zoned IPv6 literals are not accepted.
    """
    value = value.strip()
    if not value or _ZONE_SEPARATOR in value:
        return None
    try:
        ip = ipaddress.ip_address(value)
    except ValueError:
        return None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def _as_ipv4(ip: IPAddress) -> ipaddress.IPv4Address | None:
    if isinstance(ip, ipaddress.IPv4Address):
        return ip
    return ip.ipv4_mapped


def is_in_shared_address_space(ip: IPAddress) -> bool:
    """Report whether *ip* lies in ``100.64.0.0/10`` (RFC 6598)."""
    ip4 = _as_ipv4(ip)
    if ip4 is None:
        return False
    first, second = ip4.packed[0], ip4.packed[1]
    return (
        first == _SHARED_SPACE_FIRST_OCTET
        and second & _SHARED_SPACE_MASK == _SHARED_SPACE_PREFIX
    )


def _is_link_local_multicast(ip: IPAddress) -> bool:
    if isinstance(ip, ipaddress.IPv4Address):
        return ip in _IPV4_LINK_LOCAL_MULTICAST
    packed = ip.packed
    return packed[0] == 0xFF and packed[1] & 0x0F == 0x02


def is_private_ip(ip: IPAddress) -> bool:
    """Return ``True`` if *ip* is not a globally meaningful client address."""
    ip4 = _as_ipv4(ip)
    if ip4 is not None:
        ip = ip4
    return (
        ip.is_loopback
        or ip.is_link_local
        or _is_link_local_multicast(ip)
        or any(ip in net for net in _PRIVATE_NETWORKS if net.version == ip.version)
        or is_in_shared_address_space(ip)
    )
