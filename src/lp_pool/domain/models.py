"""Domain models for lp_pool: pure dataclasses, no persistence concerns."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.lp_common.enums import PoolStatus


@dataclass(frozen=True)
class CurveParams:
    """Linear bonding curve: price(supply) = base_price + supply * price_increment."""

    base_price: Decimal
    price_increment: Decimal
    max_supply: Decimal

    def __post_init__(self) -> None:
        if self.base_price <= 0:
            raise ValueError(f"base_price must be > 0, got {self.base_price}")
        if self.price_increment < 0:
            raise ValueError(f"price_increment must be >= 0, got {self.price_increment}")
        if self.max_supply <= 0:
            raise ValueError(f"max_supply must be > 0, got {self.max_supply}")


@dataclass(frozen=True)
class TradingLimits:
    min_trade_amount: Decimal   # quote asset
    max_trade_amount: Decimal   # quote asset
    quote_decimals: int = 9     # fractional digits the quote asset can carry

    def __post_init__(self) -> None:
        if self.min_trade_amount <= 0:
            raise ValueError(f"min_trade_amount must be > 0, got {self.min_trade_amount}")
        if self.max_trade_amount < self.min_trade_amount:
            raise ValueError("max_trade_amount must be >= min_trade_amount")
        if self.quote_decimals < 0:
            raise ValueError(f"quote_decimals must be >= 0, got {self.quote_decimals}")


@dataclass
class Pool:
    id: str
    token_mint: str
    pool_address: str
    status: PoolStatus
    total_liquidity: Decimal    # quote asset contributed at creation
    token_reserve: Decimal      # base asset held by the pool
    sol_reserve: Decimal        # quote asset held by the pool
    current_price: Decimal      # quote per token, always price(token_reserve)
    total_volume: Decimal       # cumulative quote asset traded
    created_at: datetime
    creator: str
    curve_params: CurveParams

    @property
    def is_active(self) -> bool:
        return self.status == PoolStatus.ACTIVE


@dataclass(frozen=True)
class PoolCreated:
    pool: Pool
    receipt: str


@dataclass(frozen=True)
class BuyExecuted:
    receipt: str
    tokens_received: Decimal
    new_price: Decimal
    pool: Pool                  # snapshot after the trade


@dataclass(frozen=True)
class SellExecuted:
    receipt: str
    quote_received: Decimal
    new_price: Decimal
    pool: Pool                  # snapshot after the trade
