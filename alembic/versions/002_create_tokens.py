"""002: create tokens table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE tokens (
            id            VARCHAR(64)   PRIMARY KEY,
            mint          VARCHAR(128)  NOT NULL UNIQUE,
            name          VARCHAR(200)  NOT NULL,
            symbol        VARCHAR(32)   NOT NULL,
            decimals      SMALLINT      NOT NULL,
            total_supply  TEXT          NOT NULL,
            creator       VARCHAR(128)  NOT NULL,
            created_at    VARCHAR(40)   NOT NULL,
            description   TEXT,
            image         TEXT,
            CONSTRAINT ck_tokens_decimals CHECK (decimals >= 0 AND decimals <= 9)
        );
    """)
    op.execute("CREATE INDEX idx_tokens_creator ON tokens (creator);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS tokens CASCADE;")
