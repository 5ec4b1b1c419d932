"""Pydantic schemas for lp_pool API requests/responses.

Field names are camelCase on the wire (tokenMint, solReserve, ...).
Decimals serialize as strings in JSON mode so no precision is lost.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from src.lp_common.decimals import decimal_to_str
from src.lp_pool.domain.models import BuyExecuted, Pool, PoolCreated, SellExecuted


Amount = Annotated[Decimal, PlainSerializer(decimal_to_str, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class CreatePoolRequest(CamelModel):
    token_mint: str = Field(min_length=1)
    initial_liquidity: Decimal = Field(gt=0)


class TradeRequest(CamelModel):
    pool_id: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class CurveParamsOut(CamelModel):
    base_price: Amount
    price_increment: Amount
    max_supply: Amount


class PoolOut(CamelModel):
    id: str
    token_mint: str
    pool_address: str
    status: str
    total_liquidity: Amount
    token_reserve: Amount
    sol_reserve: Amount
    current_price: Amount
    total_volume: Amount
    created_at: str
    creator: str
    curve_params: CurveParamsOut

    @classmethod
    def from_domain(cls, p: Pool) -> "PoolOut":
        return cls(
            id=p.id,
            token_mint=p.token_mint,
            pool_address=p.pool_address,
            status=p.status.value,
            total_liquidity=p.total_liquidity,
            token_reserve=p.token_reserve,
            sol_reserve=p.sol_reserve,
            current_price=p.current_price,
            total_volume=p.total_volume,
            created_at=p.created_at.isoformat(),
            creator=p.creator,
            curve_params=CurveParamsOut(
                base_price=p.curve_params.base_price,
                price_increment=p.curve_params.price_increment,
                max_supply=p.curve_params.max_supply,
            ),
        )


class PoolCreatedOut(CamelModel):
    pool: PoolOut
    tx_hash: str

    @classmethod
    def from_domain(cls, result: PoolCreated) -> "PoolCreatedOut":
        return cls(pool=PoolOut.from_domain(result.pool), tx_hash=result.receipt)


class BuyOut(CamelModel):
    tx_hash: str
    tokens_received: Amount
    new_price: Amount

    @classmethod
    def from_domain(cls, result: BuyExecuted) -> "BuyOut":
        return cls(
            tx_hash=result.receipt,
            tokens_received=result.tokens_received,
            new_price=result.new_price,
        )


class SellOut(CamelModel):
    tx_hash: str
    sol_received: Amount
    new_price: Amount

    @classmethod
    def from_domain(cls, result: SellExecuted) -> "SellOut":
        return cls(
            tx_hash=result.receipt,
            sol_received=result.quote_received,
            new_price=result.new_price,
        )


def dump(model: BaseModel) -> dict:
    """JSON-safe dict with camelCase keys."""
    return model.model_dump(mode="json", by_alias=True)
