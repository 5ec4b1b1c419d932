"""lp_pool REST endpoints.

POST /pool/create       create a pool for a token mint
POST /pool/buy          spend quote asset for tokens
POST /pool/sell         sell tokens for quote asset
GET  /pool/{pool_id}    pool detail
GET  /pool              all pools, optionally ?tokenMint=
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.lp_common.errors import NotFoundError
from src.lp_common.response import ApiResponse, success_response
from src.lp_gateway.auth.dependencies import get_services, get_wallet_address
from src.lp_pool.application.schemas import (
    BuyOut,
    CreatePoolRequest,
    PoolCreatedOut,
    PoolOut,
    SellOut,
    TradeRequest,
    dump,
)
from src.services import Services

router = APIRouter(prefix="/pool", tags=["pools"])


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.post("/create", status_code=201)
async def create_pool(
    body: CreatePoolRequest,
    request: Request,
    wallet: Annotated[str, Depends(get_wallet_address)],
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    result = await services.pool_store.create_pool(
        body.token_mint, body.initial_liquidity, wallet
    )
    return success_response(dump(PoolCreatedOut.from_domain(result)), _request_id(request))


@router.post("/buy")
async def buy(
    body: TradeRequest,
    request: Request,
    wallet: Annotated[str, Depends(get_wallet_address)],
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    result = await services.pool_store.buy(body.pool_id, body.amount, wallet)
    return success_response(dump(BuyOut.from_domain(result)), _request_id(request))


@router.post("/sell")
async def sell(
    body: TradeRequest,
    request: Request,
    wallet: Annotated[str, Depends(get_wallet_address)],
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    result = await services.pool_store.sell(body.pool_id, body.amount, wallet)
    return success_response(dump(SellOut.from_domain(result)), _request_id(request))


@router.get("/{pool_id}")
async def get_pool(
    pool_id: str,
    request: Request,
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    pool = await services.pool_store.get_pool(pool_id)
    if pool is None:
        raise NotFoundError(pool_id)
    return success_response(dump(PoolOut.from_domain(pool)), _request_id(request))


@router.get("")
async def list_pools(
    request: Request,
    services: Annotated[Services, Depends(get_services)],
    token_mint: str | None = Query(None, alias="tokenMint"),
) -> ApiResponse:
    pools = await services.pool_store.list_pools(token_mint)
    return success_response([dump(PoolOut.from_domain(p)) for p in pools], _request_id(request))
