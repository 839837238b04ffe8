"""IP diagnostic endpoints."""

from fastapi import APIRouter, Request

from srealip.infra.real_ip import remote_addr_from_client

from .deps import NaiveRealIPDep, ProxyConfigDep, RealIPDep, SecureRealIPDep
from .models import HealthResponse, IPResponse

router = APIRouter(tags=["ip"])


@router.get("/health")
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/api/v1/ip")
async def whoami(
    request: Request,
    config: ProxyConfigDep,
    real_ip: RealIPDep,
    secure: SecureRealIPDep,
    naive: NaiveRealIPDep,
) -> IPResponse:
    """Report the client address under both strategies.

    Useful when wiring a new proxy chain: compare ``secure`` and
    ``naive`` against the address you expect before choosing a mode.
    """
    return IPResponse(
        ip=real_ip,
        mode=config.mode,
        secure=secure,
        naive=naive,
        remote_addr=remote_addr_from_client(request.client),
    )
