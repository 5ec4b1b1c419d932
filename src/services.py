"""Service wiring: builds the object graph from Settings.

Nothing below this module reads the environment: curve parameters, limits
and store locations are passed in explicitly.
"""

from dataclasses import dataclass
from pathlib import Path

from config.settings import Settings
from src.lp_common.enums import StoreBackend
from src.lp_dashboard.application.service import DashboardService
from src.lp_ledger.domain.protocol import LedgerProtocol
from src.lp_ledger.infrastructure.simulated import SimulatedLedger
from src.lp_pool.application.store import PoolStore
from src.lp_pool.domain.models import CurveParams, TradingLimits
from src.lp_pool.domain.repository import PoolBackendProtocol
from src.lp_pool.infrastructure.json_backend import JsonPoolBackend
from src.lp_pool.infrastructure.memory import InMemoryPoolBackend
from src.lp_pool.infrastructure.sql_backend import SqlPoolBackend
from src.lp_token.application.service import TokenService
from src.lp_token.domain.repository import TokenBackendProtocol
from src.lp_token.infrastructure.persistence import (
    InMemoryTokenBackend,
    JsonTokenBackend,
    SqlTokenBackend,
)


@dataclass
class Services:
    pool_store: PoolStore
    token_service: TokenService
    dashboard: DashboardService
    ledger: LedgerProtocol


def curve_from_settings(settings: Settings) -> CurveParams:
    return CurveParams(
        base_price=settings.BASE_PRICE,
        price_increment=settings.PRICE_INCREMENT,
        max_supply=settings.MAX_SUPPLY,
    )


def limits_from_settings(settings: Settings) -> TradingLimits:
    return TradingLimits(
        min_trade_amount=settings.MIN_TRADE_AMOUNT,
        max_trade_amount=settings.MAX_TRADE_AMOUNT,
        quote_decimals=settings.QUOTE_DECIMALS,
    )


def build_backends(settings: Settings) -> tuple[PoolBackendProtocol, TokenBackendProtocol]:
    backend = StoreBackend(settings.STORE_BACKEND)
    if backend == StoreBackend.MEMORY:
        return InMemoryPoolBackend(), InMemoryTokenBackend()
    if backend == StoreBackend.SQL:
        from src.lp_common.database import get_engine

        engine = get_engine()
        return SqlPoolBackend(engine), SqlTokenBackend(engine)
    data_dir = Path(settings.DATA_DIR)
    return JsonPoolBackend(data_dir / "pools.json"), JsonTokenBackend(data_dir / "tokens.json")


def build_services(
    settings: Settings,
    ledger: LedgerProtocol | None = None,
    pool_backend: PoolBackendProtocol | None = None,
    token_backend: TokenBackendProtocol | None = None,
) -> Services:
    if pool_backend is None or token_backend is None:
        default_pools, default_tokens = build_backends(settings)
        pool_backend = pool_backend or default_pools
        token_backend = token_backend or default_tokens
    ledger = ledger or SimulatedLedger()

    pool_store = PoolStore(
        backend=pool_backend,
        ledger=ledger,
        curve=curve_from_settings(settings),
        limits=limits_from_settings(settings),
    )
    token_service = TokenService(
        backend=token_backend,
        ledger=ledger,
        max_decimals=settings.MAX_TOKEN_DECIMALS,
    )
    return Services(
        pool_store=pool_store,
        token_service=token_service,
        dashboard=DashboardService(token_service, pool_store),
        ledger=ledger,
    )
