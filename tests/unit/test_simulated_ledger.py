"""Tests for SimulatedLedger receipts and failure injection."""
from decimal import Decimal

import pytest

from src.lp_common.enums import SettlementKind
from src.lp_common.errors import LedgerError
from src.lp_ledger.infrastructure.simulated import SimulatedLedger


class TestSimulatedLedger:
    @pytest.mark.asyncio
    async def test_receipt_format(self) -> None:
        ledger = SimulatedLedger()
        receipt = await ledger.settle_trade(
            SettlementKind.SELL, "pool-1", "wallet", Decimal("0.1"), Decimal(1)
        )
        assert receipt.startswith("simulated_sell_tx_")

    @pytest.mark.asyncio
    async def test_receipts_are_unique(self) -> None:
        ledger = SimulatedLedger()
        receipts = {
            await ledger.settle_trade(SettlementKind.BUY, "p", "w", Decimal(1), Decimal(1))
            for _ in range(50)
        }
        assert len(receipts) == 50
        assert len(ledger.settlements) == 50

    @pytest.mark.asyncio
    async def test_mint_records_owner(self) -> None:
        ledger = SimulatedLedger()
        result = await ledger.mint_token("Coin", "CN", 9, Decimal(100), "owner")
        assert result.mint.startswith("simulated_mint_")
        assert result.receipt.startswith("simulated_mint_tx_")
        assert ledger.mints == {result.mint: "owner"}

    @pytest.mark.asyncio
    async def test_fail_with(self) -> None:
        ledger = SimulatedLedger()
        ledger.fail_with = "offline"
        with pytest.raises(LedgerError, match="offline"):
            await ledger.settle_trade(SettlementKind.BUY, "p", "w", Decimal(1), Decimal(1))
        assert ledger.settlements == []
