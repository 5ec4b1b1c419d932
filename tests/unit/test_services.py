"""Tests for settings-driven service wiring."""
from decimal import Decimal

from config.settings import Settings
from src.lp_ledger.infrastructure.simulated import SimulatedLedger
from src.lp_pool.infrastructure.json_backend import JsonPoolBackend
from src.lp_pool.infrastructure.memory import InMemoryPoolBackend
from src.lp_token.infrastructure.persistence import InMemoryTokenBackend
from src.services import build_backends, build_services, curve_from_settings, limits_from_settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.BASE_PRICE == Decimal("0.000001")
        assert s.PRICE_INCREMENT == Decimal("0.0000001")
        assert s.MAX_SUPPLY == Decimal(1_000_000_000)
        assert s.MIN_TRADE_AMOUNT == Decimal("0.001")
        assert s.MAX_TRADE_AMOUNT == Decimal(10)
        assert s.MAX_TOKEN_DECIMALS == 9
        assert s.QUOTE_DECIMALS == 9
        assert s.CORS_ORIGINS == ["*"]

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("BASE_PRICE", "0.5")
        monkeypatch.setenv("STORE_BACKEND", "memory")
        s = Settings()
        assert s.BASE_PRICE == Decimal("0.5")
        assert curve_from_settings(s).base_price == Decimal("0.5")

    def test_quote_decimals_reach_trading_limits(self, monkeypatch) -> None:
        monkeypatch.setenv("QUOTE_DECIMALS", "6")
        assert limits_from_settings(Settings()).quote_decimals == 6


class TestBuildBackends:
    def test_json_paths_under_data_dir(self, tmp_path) -> None:
        pools, _ = build_backends(Settings(STORE_BACKEND="json", DATA_DIR=str(tmp_path)))
        assert isinstance(pools, JsonPoolBackend)
        assert pools.path == tmp_path / "pools.json"

    def test_memory(self) -> None:
        pools, tokens = build_backends(Settings(STORE_BACKEND="memory"))
        assert isinstance(pools, InMemoryPoolBackend)
        assert isinstance(tokens, InMemoryTokenBackend)


class TestBuildServices:
    def test_shares_one_ledger(self) -> None:
        ledger = SimulatedLedger()
        services = build_services(Settings(STORE_BACKEND="memory"), ledger=ledger)
        assert services.ledger is ledger
        assert services.pool_store.limits == limits_from_settings(Settings())

    def test_injected_backend_used(self) -> None:
        backend = InMemoryPoolBackend()
        services = build_services(Settings(STORE_BACKEND="memory"), pool_backend=backend)
        assert services.pool_store.curve == curve_from_settings(Settings())
