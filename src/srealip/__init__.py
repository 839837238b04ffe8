"""Real client IP extraction behind reverse proxies and load balancers.

``secure_real_ip`` is the one to use for security decisions (rate
limiting, audit logs) when every hop in front of the service is a
trusted proxy.  ``naive_real_ip`` is a best guess for display only.
"""

from .classifier import is_in_shared_address_space, is_private_ip, parse_ip
from .selector import (
    extract_ip_from_remote_addr,
    naive_real_ip,
    secure_real_ip,
    split_host_port,
)

__all__ = [
    "extract_ip_from_remote_addr",
    "is_in_shared_address_space",
    "is_private_ip",
    "naive_real_ip",
    "parse_ip",
    "secure_real_ip",
    "split_host_port",
]
