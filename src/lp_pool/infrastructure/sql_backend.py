"""SqlPoolBackend: pool collection in the `pools` table.

All queries use raw text() SQL (no ORM). Amounts are TEXT columns so the
Decimal values round-trip exactly on every dialect. save_all upserts every
pool inside a single transaction; pools are never deleted.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from src.lp_pool.domain.models import Pool
from src.lp_pool.infrastructure.mappers import pool_to_params, row_to_pool

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

CREATE_POOLS_TABLE_SQL = text("""
    CREATE TABLE IF NOT EXISTS pools (
        id               VARCHAR(64)  PRIMARY KEY,
        token_mint       VARCHAR(128) NOT NULL,
        pool_address     VARCHAR(128) NOT NULL,
        status           VARCHAR(20)  NOT NULL,
        total_liquidity  TEXT         NOT NULL,
        token_reserve    TEXT         NOT NULL,
        sol_reserve      TEXT         NOT NULL,
        current_price    TEXT         NOT NULL,
        total_volume     TEXT         NOT NULL,
        base_price       TEXT         NOT NULL,
        price_increment  TEXT         NOT NULL,
        max_supply       TEXT         NOT NULL,
        creator          VARCHAR(128) NOT NULL,
        created_at       VARCHAR(40)  NOT NULL
    )
""")

_LOAD_POOLS_SQL = text("""
    SELECT id, token_mint, pool_address, status,
           total_liquidity, token_reserve, sol_reserve,
           current_price, total_volume,
           base_price, price_increment, max_supply,
           creator, created_at
    FROM pools
    ORDER BY created_at ASC, id ASC
""")

_UPSERT_POOL_SQL = text("""
    INSERT INTO pools (
        id, token_mint, pool_address, status,
        total_liquidity, token_reserve, sol_reserve,
        current_price, total_volume,
        base_price, price_increment, max_supply,
        creator, created_at
    ) VALUES (
        :id, :token_mint, :pool_address, :status,
        :total_liquidity, :token_reserve, :sol_reserve,
        :current_price, :total_volume,
        :base_price, :price_increment, :max_supply,
        :creator, :created_at
    )
    ON CONFLICT (id) DO UPDATE SET
        status          = excluded.status,
        sol_reserve     = excluded.sol_reserve,
        token_reserve   = excluded.token_reserve,
        current_price   = excluded.current_price,
        total_volume    = excluded.total_volume
""")


# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

class SqlPoolBackend:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def ensure_schema(self) -> None:
        """Create the table when migrations have not been run (sqlite dev/test)."""
        async with self._engine.begin() as conn:
            await conn.execute(CREATE_POOLS_TABLE_SQL)

    async def load_all(self) -> list[Pool]:
        async with self._engine.connect() as conn:
            result = await conn.execute(_LOAD_POOLS_SQL)
            rows = result.fetchall()
        return [row_to_pool(row) for row in rows]

    async def save_all(self, pools: list[Pool]) -> None:
        if not pools:
            return
        async with self._engine.begin() as conn:
            await conn.execute(_UPSERT_POOL_SQL, [pool_to_params(p) for p in pools])
