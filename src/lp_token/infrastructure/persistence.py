"""Token registry backends: in-memory, tokens.json document, `tokens` table."""

import copy
from pathlib import Path
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from src.lp_common.datetime_utils import parse_iso
from src.lp_common.decimals import decimal_to_str, to_decimal
from src.lp_common.json_file import JsonDocumentFile
from src.lp_token.domain.models import TokenMetadata

# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------


def token_to_record(token: TokenMetadata) -> dict[str, Any]:
    return {
        "id": token.id,
        "mint": token.mint,
        "name": token.name,
        "symbol": token.symbol,
        "decimals": token.decimals,
        "totalSupply": decimal_to_str(token.total_supply),
        "creator": token.creator,
        "createdAt": token.created_at.isoformat(),
        "description": token.description,
        "image": token.image,
    }


def record_to_token(record: dict[str, Any]) -> TokenMetadata:
    return TokenMetadata(
        id=record["id"],
        mint=record["mint"],
        name=record["name"],
        symbol=record["symbol"],
        decimals=int(record["decimals"]),
        total_supply=to_decimal(record["totalSupply"]),
        creator=record["creator"],
        created_at=parse_iso(record["createdAt"]),
        description=record.get("description"),
        image=record.get("image"),
    )


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


class InMemoryTokenBackend:
    def __init__(self, tokens: list[TokenMetadata] | None = None) -> None:
        self._tokens: list[TokenMetadata] = copy.deepcopy(tokens or [])

    async def load_all(self) -> list[TokenMetadata]:
        return copy.deepcopy(self._tokens)

    async def save_all(self, tokens: list[TokenMetadata]) -> None:
        self._tokens = copy.deepcopy(tokens)


class JsonTokenBackend:
    def __init__(self, path: str | Path) -> None:
        self._file = JsonDocumentFile(path)

    async def load_all(self) -> list[TokenMetadata]:
        return [record_to_token(r) for r in await self._file.read()]

    async def save_all(self, tokens: list[TokenMetadata]) -> None:
        await self._file.write([token_to_record(t) for t in tokens])


CREATE_TOKENS_TABLE_SQL = text("""
    CREATE TABLE IF NOT EXISTS tokens (
        id            VARCHAR(64)  PRIMARY KEY,
        mint          VARCHAR(128) NOT NULL UNIQUE,
        name          VARCHAR(200) NOT NULL,
        symbol        VARCHAR(32)  NOT NULL,
        decimals      SMALLINT     NOT NULL,
        total_supply  TEXT         NOT NULL,
        creator       VARCHAR(128) NOT NULL,
        created_at    VARCHAR(40)  NOT NULL,
        description   TEXT,
        image         TEXT
    )
""")

_LOAD_TOKENS_SQL = text("""
    SELECT id, mint, name, symbol, decimals, total_supply,
           creator, created_at, description, image
    FROM tokens
    ORDER BY created_at ASC, id ASC
""")

# Token metadata is immutable once minted: existing rows are left untouched
_INSERT_TOKEN_SQL = text("""
    INSERT INTO tokens (
        id, mint, name, symbol, decimals, total_supply,
        creator, created_at, description, image
    ) VALUES (
        :id, :mint, :name, :symbol, :decimals, :total_supply,
        :creator, :created_at, :description, :image
    )
    ON CONFLICT (id) DO NOTHING
""")


class SqlTokenBackend:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def ensure_schema(self) -> None:
        async with self._engine.begin() as conn:
            await conn.execute(CREATE_TOKENS_TABLE_SQL)

    async def load_all(self) -> list[TokenMetadata]:
        async with self._engine.connect() as conn:
            rows = (await conn.execute(_LOAD_TOKENS_SQL)).fetchall()
        return [
            TokenMetadata(
                id=row.id,
                mint=row.mint,
                name=row.name,
                symbol=row.symbol,
                decimals=int(row.decimals),
                total_supply=to_decimal(row.total_supply),
                creator=row.creator,
                created_at=parse_iso(row.created_at),
                description=row.description,
                image=row.image,
            )
            for row in rows
        ]

    async def save_all(self, tokens: list[TokenMetadata]) -> None:
        if not tokens:
            return
        params = [
            {
                "id": t.id,
                "mint": t.mint,
                "name": t.name,
                "symbol": t.symbol,
                "decimals": t.decimals,
                "total_supply": decimal_to_str(t.total_supply),
                "creator": t.creator,
                "created_at": t.created_at.isoformat(),
                "description": t.description,
                "image": t.image,
            }
            for t in tokens
        ]
        async with self._engine.begin() as conn:
            await conn.execute(_INSERT_TOKEN_SQL, params)
