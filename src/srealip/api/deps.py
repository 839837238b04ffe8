"""Centralized FastAPI dependency type aliases.

Each alias corresponds to a single ``get_*`` factory and can be
overridden in tests via ``app.dependency_overrides[get_xxx] = ...``.
"""

from typing import Annotated

from fastapi import Depends

from srealip.configs.config import get_proxy_config
from srealip.configs.system import ProxyConfig
from srealip.infra.real_ip import get_naive_real_ip, get_real_ip, get_secure_real_ip

ProxyConfigDep = Annotated[ProxyConfig, Depends(get_proxy_config)]
RealIPDep = Annotated[str, Depends(get_real_ip)]
SecureRealIPDep = Annotated[str, Depends(get_secure_real_ip)]
NaiveRealIPDep = Annotated[str, Depends(get_naive_real_ip)]
