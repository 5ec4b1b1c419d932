"""Ledger collaborator Protocol.

The ledger mints tokens and settles trades outside this service. Both calls
are assumed atomic on the ledger side: they either return an identifier or
raise. Signatures and on-chain settlement are the implementation's concern.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from src.lp_common.enums import SettlementKind


@dataclass(frozen=True)
class MintResult:
    mint: str       # token mint id
    receipt: str    # ledger transaction that created it


class LedgerProtocol(Protocol):
    async def mint_token(
        self,
        name: str,
        symbol: str,
        decimals: int,
        initial_supply: Decimal,
        owner: str,
    ) -> MintResult: ...

    async def settle_trade(
        self,
        kind: SettlementKind,
        pool_id: str,
        wallet: str,
        quote_amount: Decimal,
        token_amount: Decimal,
    ) -> str: ...
