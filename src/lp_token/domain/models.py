"""Domain models for lp_token."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class TokenMetadata:
    id: str
    mint: str                   # ledger mint id
    name: str
    symbol: str
    decimals: int
    total_supply: Decimal
    creator: str
    created_at: datetime
    description: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class TokenCreated:
    token: TokenMetadata
    receipt: str                # mint transaction id
