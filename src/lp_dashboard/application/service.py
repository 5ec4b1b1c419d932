"""DashboardService: read-only aggregation over the token registry and pools.

A token's dashboard row uses its first Active pool; tokens without one are
reported with status "no_pool" and zeroed figures.
"""

from src.lp_common.decimals import ZERO
from src.lp_common.enums import PoolStatus
from src.lp_dashboard.application.schemas import (
    DashboardPoolRow,
    DashboardStats,
    DashboardTokenRow,
)
from src.lp_pool.application.store import PoolStore
from src.lp_pool.domain.models import Pool
from src.lp_token.application.service import TokenService

NO_POOL = "no_pool"


class DashboardService:
    def __init__(self, tokens: TokenService, pools: PoolStore) -> None:
        self._tokens = tokens
        self._pools = pools

    async def tokens(self) -> list[DashboardTokenRow]:
        tokens = await self._tokens.list_tokens()
        pools = await self._pools.list_pools()

        active_by_mint: dict[str, Pool] = {}
        for pool in pools:
            if pool.status == PoolStatus.ACTIVE:
                active_by_mint.setdefault(pool.token_mint, pool)

        rows = []
        for token in sorted(tokens, key=lambda t: t.created_at, reverse=True):
            pool = active_by_mint.get(token.mint)
            rows.append(
                DashboardTokenRow(
                    token_mint=token.mint,
                    symbol=token.symbol,
                    name=token.name,
                    decimals=token.decimals,
                    total_supply=token.total_supply,
                    creator=token.creator,
                    created_at=token.created_at.isoformat(),
                    description=token.description,
                    image=token.image,
                    pool_address=pool.pool_address if pool else None,
                    pool_id=pool.id if pool else None,
                    current_price=pool.current_price if pool else ZERO,
                    total_liquidity=pool.total_liquidity if pool else ZERO,
                    total_volume=pool.total_volume if pool else ZERO,
                    token_reserve=pool.token_reserve if pool else ZERO,
                    sol_reserve=pool.sol_reserve if pool else ZERO,
                    status=pool.status.value if pool else NO_POOL,
                    pool_created_at=pool.created_at.isoformat() if pool else None,
                )
            )
        return rows

    async def stats(self) -> DashboardStats:
        tokens = await self._tokens.list_tokens()
        pools = await self._pools.list_pools()
        active = [p for p in pools if p.status == PoolStatus.ACTIVE]

        total_liquidity = sum((p.total_liquidity for p in active), ZERO)
        total_volume = sum((p.total_volume for p in active), ZERO)
        count = len(active)
        return DashboardStats(
            total_tokens=len(tokens),
            active_pools=count,
            total_liquidity=total_liquidity,
            total_volume=total_volume,
            average_liquidity=total_liquidity / count if count else ZERO,
            average_volume=total_volume / count if count else ZERO,
        )

    async def pools(self) -> list[DashboardPoolRow]:
        pools = await self._pools.list_pools()
        tokens = {t.mint: t for t in await self._tokens.list_tokens()}

        rows = [DashboardPoolRow.from_pool(p, tokens.get(p.token_mint)) for p in pools]
        rows.sort(key=lambda r: r.total_volume, reverse=True)
        return rows
