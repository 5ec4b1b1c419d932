"""lp_token REST endpoints.

POST /token/create        mint a token through the ledger and register it ({token, txHash})
GET  /token/{mint}        token detail
GET  /token               all tokens, optionally ?creator=
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.lp_common.response import ApiResponse, success_response
from src.lp_gateway.auth.dependencies import get_services, get_wallet_address
from src.lp_pool.application.schemas import dump
from src.lp_token.application.schemas import CreateTokenRequest, TokenOut
from src.services import Services

router = APIRouter(prefix="/token", tags=["tokens"])


@router.post("/create", status_code=201)
async def create_token(
    body: CreateTokenRequest,
    request: Request,
    wallet: Annotated[str, Depends(get_wallet_address)],
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    result = await services.token_service.create_token(
        name=body.name,
        symbol=body.symbol,
        decimals=body.decimals,
        initial_supply=body.initial_supply,
        creator=wallet,
        description=body.description,
        image=body.image,
    )
    return success_response(
        {"token": dump(TokenOut.from_domain(result.token)), "txHash": result.receipt},
        getattr(request.state, "request_id", None),
    )


@router.get("/{mint}")
async def get_token(
    mint: str,
    request: Request,
    services: Annotated[Services, Depends(get_services)],
) -> ApiResponse:
    token = await services.token_service.get_token(mint)
    return success_response(
        dump(TokenOut.from_domain(token)), getattr(request.state, "request_id", None)
    )


@router.get("")
async def list_tokens(
    request: Request,
    services: Annotated[Services, Depends(get_services)],
    creator: str | None = Query(None),
) -> ApiResponse:
    tokens = await services.token_service.list_tokens(creator)
    return success_response(
        [dump(TokenOut.from_domain(t)) for t in tokens],
        getattr(request.state, "request_id", None),
    )
