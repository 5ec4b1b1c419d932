"""lp_dashboard REST endpoints (read-only).

GET /dashboard/tokens  tokens joined with their active pool, newest first
GET /dashboard/stats   totals and averages over active pools
GET /dashboard/pools   pools enriched with token metadata, highest volume first
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lp_common.response import ApiResponse, success_response
from src.lp_gateway.auth.dependencies import get_services
from src.lp_pool.application.schemas import dump
from src.services import Services

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/tokens")
async def dashboard_tokens(
    request: Request,
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    rows = await services.dashboard.tokens()
    return success_response([dump(r) for r in rows], getattr(request.state, "request_id", None))


@router.get("/stats")
async def dashboard_stats(
    request: Request,
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    stats = await services.dashboard.stats()
    return success_response(dump(stats), getattr(request.state, "request_id", None))


@router.get("/pools")
async def dashboard_pools(
    request: Request,
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    rows = await services.dashboard.pools()
    return success_response([dump(r) for r in rows], getattr(request.state, "request_id", None))
