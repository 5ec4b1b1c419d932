"""001: create pools table

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Amounts are TEXT: the service reads them back as exact Decimals
    op.execute("""
        CREATE TABLE pools (
            id               VARCHAR(64)   PRIMARY KEY,
            token_mint       VARCHAR(128)  NOT NULL,
            pool_address     VARCHAR(128)  NOT NULL,
            status           VARCHAR(20)   NOT NULL DEFAULT 'active',
            total_liquidity  TEXT          NOT NULL,
            token_reserve    TEXT          NOT NULL,
            sol_reserve      TEXT          NOT NULL,
            current_price    TEXT          NOT NULL,
            total_volume     TEXT          NOT NULL DEFAULT '0',
            base_price       TEXT          NOT NULL,
            price_increment  TEXT          NOT NULL,
            max_supply       TEXT          NOT NULL,
            creator          VARCHAR(128)  NOT NULL,
            created_at       VARCHAR(40)   NOT NULL,
            CONSTRAINT ck_pools_status CHECK (
                status IN ('active', 'paused', 'completed', 'cancelled')
            ),
            CONSTRAINT ck_pools_token_reserve_gte_0 CHECK (CAST(token_reserve AS NUMERIC) >= 0),
            CONSTRAINT ck_pools_sol_reserve_gte_0   CHECK (CAST(sol_reserve AS NUMERIC) >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_pools_token_mint ON pools (token_mint);")
    op.execute("CREATE INDEX idx_pools_status ON pools (status);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS pools CASCADE;")
