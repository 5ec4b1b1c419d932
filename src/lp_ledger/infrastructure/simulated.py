"""SimulatedLedger: stands in for on-chain settlement.

Issues receipt ids of the form `simulated_<kind>_tx_<id>` without touching
any chain. Settlements are recorded in memory so tests can inspect them.
`fail_with` makes every subsequent call raise LedgerError.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from src.lp_common.enums import SettlementKind
from src.lp_common.errors import LedgerError
from src.lp_common.id_generator import generate_id
from src.lp_ledger.domain.protocol import MintResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettlementRecord:
    receipt: str
    kind: SettlementKind
    pool_id: str
    wallet: str
    quote_amount: Decimal
    token_amount: Decimal


class SimulatedLedger:
    def __init__(self) -> None:
        self.settlements: list[SettlementRecord] = []
        self.mints: dict[str, str] = {}     # mint id -> owner
        self.fail_with: str | None = None

    async def mint_token(
        self,
        name: str,
        symbol: str,
        decimals: int,
        initial_supply: Decimal,
        owner: str,
    ) -> MintResult:
        self._maybe_fail()
        mint = f"simulated_mint_{generate_id()}"
        receipt = f"simulated_mint_tx_{generate_id()}"
        self.mints[mint] = owner
        logger.info(
            "Simulated mint %s: %s (%s) supply=%s decimals=%d owner=%s",
            mint, name, symbol, initial_supply, decimals, owner,
        )
        return MintResult(mint=mint, receipt=receipt)

    async def settle_trade(
        self,
        kind: SettlementKind,
        pool_id: str,
        wallet: str,
        quote_amount: Decimal,
        token_amount: Decimal,
    ) -> str:
        self._maybe_fail()
        receipt = f"simulated_{kind.value}_tx_{generate_id()}"
        self.settlements.append(
            SettlementRecord(receipt, kind, pool_id, wallet, quote_amount, token_amount)
        )
        return receipt

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise LedgerError(self.fail_with)
