"""Pydantic schemas for lp_token API requests/responses."""

from decimal import Decimal

from pydantic import Field

from src.lp_pool.application.schemas import Amount, CamelModel
from src.lp_token.domain.models import TokenMetadata


class CreateTokenRequest(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    symbol: str = Field(min_length=1, max_length=32)
    decimals: int
    initial_supply: Decimal = Field(gt=0)
    description: str | None = None
    image: str | None = None


class TokenOut(CamelModel):
    id: str
    mint: str
    name: str
    symbol: str
    decimals: int
    total_supply: Amount
    creator: str
    created_at: str
    description: str | None
    image: str | None

    @classmethod
    def from_domain(cls, t: TokenMetadata) -> "TokenOut":
        return cls(
            id=t.id,
            mint=t.mint,
            name=t.name,
            symbol=t.symbol,
            decimals=t.decimals,
            total_supply=t.total_supply,
            creator=t.creator,
            created_at=t.created_at.isoformat(),
            description=t.description,
            image=t.image,
        )
