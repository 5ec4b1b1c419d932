"""Pool <-> persisted shape.

JSON documents use the camelCase keys of the original pools.json data file;
SQL rows use snake_case columns. Decimals travel as strings in both.
"""

from typing import Any

from src.lp_common.datetime_utils import parse_iso
from src.lp_common.decimals import decimal_to_str, to_decimal
from src.lp_common.enums import PoolStatus
from src.lp_pool.domain.models import CurveParams, Pool


def pool_to_record(pool: Pool) -> dict[str, Any]:
    return {
        "id": pool.id,
        "tokenMint": pool.token_mint,
        "poolAddress": pool.pool_address,
        "status": pool.status.value,
        "totalLiquidity": decimal_to_str(pool.total_liquidity),
        "tokenReserve": decimal_to_str(pool.token_reserve),
        "solReserve": decimal_to_str(pool.sol_reserve),
        "currentPrice": decimal_to_str(pool.current_price),
        "totalVolume": decimal_to_str(pool.total_volume),
        "createdAt": pool.created_at.isoformat(),
        "creator": pool.creator,
        "curveParams": {
            "basePrice": decimal_to_str(pool.curve_params.base_price),
            "priceIncrement": decimal_to_str(pool.curve_params.price_increment),
            "maxSupply": decimal_to_str(pool.curve_params.max_supply),
        },
    }


def record_to_pool(record: dict[str, Any]) -> Pool:
    curve = record["curveParams"]
    return Pool(
        id=record["id"],
        token_mint=record["tokenMint"],
        pool_address=record.get("poolAddress", ""),
        status=PoolStatus(record["status"]),
        total_liquidity=to_decimal(record["totalLiquidity"]),
        token_reserve=to_decimal(record["tokenReserve"]),
        sol_reserve=to_decimal(record["solReserve"]),
        current_price=to_decimal(record["currentPrice"]),
        total_volume=to_decimal(record["totalVolume"]),
        created_at=parse_iso(record["createdAt"]),
        creator=record["creator"],
        curve_params=CurveParams(
            base_price=to_decimal(curve["basePrice"]),
            price_increment=to_decimal(curve["priceIncrement"]),
            max_supply=to_decimal(curve["maxSupply"]),
        ),
    )


def pool_to_params(pool: Pool) -> dict[str, Any]:
    return {
        "id": pool.id,
        "token_mint": pool.token_mint,
        "pool_address": pool.pool_address,
        "status": pool.status.value,
        "total_liquidity": decimal_to_str(pool.total_liquidity),
        "token_reserve": decimal_to_str(pool.token_reserve),
        "sol_reserve": decimal_to_str(pool.sol_reserve),
        "current_price": decimal_to_str(pool.current_price),
        "total_volume": decimal_to_str(pool.total_volume),
        "base_price": decimal_to_str(pool.curve_params.base_price),
        "price_increment": decimal_to_str(pool.curve_params.price_increment),
        "max_supply": decimal_to_str(pool.curve_params.max_supply),
        "creator": pool.creator,
        "created_at": pool.created_at.isoformat(),
    }


def row_to_pool(row: object) -> Pool:
    return Pool(
        id=row.id,  # type: ignore[attr-defined]
        token_mint=row.token_mint,  # type: ignore[attr-defined]
        pool_address=row.pool_address,  # type: ignore[attr-defined]
        status=PoolStatus(row.status),  # type: ignore[attr-defined]
        total_liquidity=to_decimal(row.total_liquidity),  # type: ignore[attr-defined]
        token_reserve=to_decimal(row.token_reserve),  # type: ignore[attr-defined]
        sol_reserve=to_decimal(row.sol_reserve),  # type: ignore[attr-defined]
        current_price=to_decimal(row.current_price),  # type: ignore[attr-defined]
        total_volume=to_decimal(row.total_volume),  # type: ignore[attr-defined]
        created_at=parse_iso(row.created_at),  # type: ignore[attr-defined]
        creator=row.creator,  # type: ignore[attr-defined]
        curve_params=CurveParams(
            base_price=to_decimal(row.base_price),  # type: ignore[attr-defined]
            price_increment=to_decimal(row.price_increment),  # type: ignore[attr-defined]
            max_supply=to_decimal(row.max_supply),  # type: ignore[attr-defined]
        ),
    )
