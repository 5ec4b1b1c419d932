"""Pydantic schemas for dashboard responses (camelCase on the wire)."""

from src.lp_pool.application.schemas import Amount, CamelModel, CurveParamsOut
from src.lp_pool.domain.models import Pool
from src.lp_token.domain.models import TokenMetadata

UNKNOWN_TOKEN_NAME = "Unknown"
UNKNOWN_TOKEN_SYMBOL = "UNK"
DEFAULT_TOKEN_DECIMALS = 9


class DashboardTokenRow(CamelModel):
    token_mint: str
    symbol: str
    name: str
    decimals: int
    total_supply: Amount
    creator: str
    created_at: str
    description: str | None
    image: str | None
    pool_address: str | None
    pool_id: str | None
    current_price: Amount
    total_liquidity: Amount
    total_volume: Amount
    token_reserve: Amount
    sol_reserve: Amount
    status: str
    pool_created_at: str | None


class DashboardStats(CamelModel):
    total_tokens: int
    active_pools: int
    total_liquidity: Amount
    total_volume: Amount
    average_liquidity: Amount
    average_volume: Amount


class DashboardPoolRow(CamelModel):
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
    token_name: str
    token_symbol: str
    token_decimals: int

    @classmethod
    def from_pool(cls, p: Pool, token: TokenMetadata | None) -> "DashboardPoolRow":
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
            token_name=token.name if token else UNKNOWN_TOKEN_NAME,
            token_symbol=token.symbol if token else UNKNOWN_TOKEN_SYMBOL,
            token_decimals=token.decimals if token else DEFAULT_TOKEN_DECIMALS,
        )
