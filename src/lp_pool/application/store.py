"""PoolStore: authoritative pool collection and the only writer of pool state.

Every mutation (create_pool, buy, sell) runs as one unit under a single
asyncio.Lock:

    reload collection -> validate -> price -> build new pool state
    -> verify invariants -> ledger settlement -> save_all -> publish

The committed snapshot (`self._pools`) is replaced only after save_all
succeeds, so a failed write leaves nothing behind for readers to see.
Readers never take the lock; they copy out of the last committed snapshot.
"""

import asyncio
import copy
import logging
from dataclasses import replace
from decimal import Decimal

from src.lp_common.datetime_utils import utc_now
from src.lp_common.decimals import ZERO, decimal_places, is_whole, to_decimal
from src.lp_common.enums import PoolStatus, SettlementKind
from src.lp_common.errors import (
    AppError,
    InsufficientAmountError,
    InvalidStateError,
    LedgerError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from src.lp_common.id_generator import new_pool_address, new_pool_id
from src.lp_ledger.domain.protocol import LedgerProtocol
from src.lp_pool.domain.invariants import verify_pool_invariants
from src.lp_pool.domain.models import (
    BuyExecuted,
    CurveParams,
    Pool,
    PoolCreated,
    SellExecuted,
    TradingLimits,
)
from src.lp_pool.domain.pricing import PricingEngine
from src.lp_pool.domain.repository import PoolBackendProtocol

logger = logging.getLogger(__name__)


def _parse_amount(value: object, field: str) -> Decimal:
    try:
        return to_decimal(value)
    except ValueError:
        raise ValidationError(f"{field} must be a decimal number, got {value!r}") from None


def _require_text(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()


class PoolStore:
    def __init__(
        self,
        backend: PoolBackendProtocol,
        ledger: LedgerProtocol,
        curve: CurveParams,
        limits: TradingLimits,
    ) -> None:
        self._backend = backend
        self._ledger = ledger
        self._curve = curve
        self._limits = limits
        self._pools: dict[str, Pool] = {}
        self._loaded = False
        self._write_lock = asyncio.Lock()

    @property
    def curve(self) -> CurveParams:
        return self._curve

    @property
    def limits(self) -> TradingLimits:
        return self._limits

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_pool(self, pool_id: str) -> Pool | None:
        await self._ensure_loaded()
        pool = self._pools.get(pool_id)
        return copy.copy(pool) if pool is not None else None

    async def list_pools(self, token_mint: str | None = None) -> list[Pool]:
        await self._ensure_loaded()
        snapshot = self._pools
        return [
            copy.copy(p)
            for p in snapshot.values()
            if token_mint is None or p.token_mint == token_mint
        ]

    async def refresh(self) -> None:
        """Rebuild the committed snapshot from the backend."""
        async with self._write_lock:
            self._pools = await self._load()
            self._loaded = True

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_pool(
        self, token_mint: str, initial_liquidity: object, creator: str
    ) -> PoolCreated:
        token_mint = _require_text(token_mint, "tokenMint")
        creator = _require_text(creator, "creator")
        liquidity = _parse_amount(initial_liquidity, "initialLiquidity")
        self._check_quote_precision(liquidity)
        if liquidity < self._limits.min_trade_amount:
            raise ValidationError(
                f"Initial liquidity must be at least {self._limits.min_trade_amount}"
            )

        engine = PricingEngine(self._curve)
        initial_tokens = engine.tokens_for_quote(liquidity, ZERO)
        if initial_tokens <= ZERO:
            raise InsufficientAmountError(
                f"{liquidity} buys no tokens at base price {self._curve.base_price}"
            )
        if initial_tokens > self._curve.max_supply:
            raise ValidationError(
                f"Initial token amount {initial_tokens} exceeds max supply {self._curve.max_supply}"
            )

        pool = Pool(
            id=new_pool_id(),
            token_mint=token_mint,
            pool_address=new_pool_address(),
            status=PoolStatus.ACTIVE,
            total_liquidity=liquidity,
            token_reserve=initial_tokens,
            sol_reserve=liquidity,
            current_price=engine.price(initial_tokens),
            total_volume=ZERO,
            created_at=utc_now(),
            creator=creator,
            curve_params=self._curve,
        )
        verify_pool_invariants(pool)

        async with self._write_lock:
            working = await self._load()
            receipt = await self._settle(
                SettlementKind.POOL_CREATE, pool.id, creator, liquidity, initial_tokens
            )
            working[pool.id] = pool
            await self._commit(working, receipt)

        logger.info(
            "Pool created: id=%s mint=%s liquidity=%s tokens=%s price=%s",
            pool.id, token_mint, liquidity, initial_tokens, pool.current_price,
        )
        return PoolCreated(pool=copy.copy(pool), receipt=receipt)

    async def buy(self, pool_id: str, quote_amount: object, trader: str) -> BuyExecuted:
        trader = _require_text(trader, "trader")
        async with self._write_lock:
            working = await self._load()
            pool = self._require_active(working, pool_id)
            amount = _parse_amount(quote_amount, "amount")
            self._check_trade_limits(amount)

            engine = PricingEngine(pool.curve_params)
            tokens = engine.tokens_for_quote(amount, pool.token_reserve)
            if tokens <= ZERO:
                raise InsufficientAmountError(
                    f"{amount} is below the unit price {engine.price(pool.token_reserve)}"
                )
            if tokens > pool.token_reserve:
                raise InsufficientAmountError(
                    f"pool holds {pool.token_reserve} tokens, {tokens} requested"
                )

            new_reserve = pool.token_reserve - tokens
            updated = replace(
                pool,
                sol_reserve=pool.sol_reserve + amount,
                token_reserve=new_reserve,
                total_volume=pool.total_volume + amount,
                current_price=engine.price(new_reserve),
            )
            verify_pool_invariants(updated)

            receipt = await self._settle(SettlementKind.BUY, pool.id, trader, amount, tokens)
            working[pool.id] = updated
            await self._commit(working, receipt)

        logger.info(
            "Buy executed: pool=%s trader=%s paid=%s tokens=%s new_price=%s",
            pool_id, trader, amount, tokens, updated.current_price,
        )
        return BuyExecuted(
            receipt=receipt,
            tokens_received=tokens,
            new_price=updated.current_price,
            pool=copy.copy(updated),
        )

    async def sell(self, pool_id: str, token_amount: object, trader: str) -> SellExecuted:
        trader = _require_text(trader, "trader")
        async with self._write_lock:
            working = await self._load()
            pool = self._require_active(working, pool_id)
            amount = _parse_amount(token_amount, "amount")
            if amount <= ZERO:
                raise ValidationError(f"Token amount must be greater than 0, got {amount}")
            if not is_whole(amount):
                raise ValidationError(f"Token amount must be a whole number, got {amount}")
            # price(token_reserve - amount) is only defined for amount <= token_reserve
            if amount > pool.token_reserve:
                raise InsufficientAmountError(
                    f"pool holds {pool.token_reserve} tokens, cannot price a sale of {amount}"
                )
            if pool.token_reserve + amount > pool.curve_params.max_supply:
                raise ValidationError(
                    f"Sale would raise token reserve above max supply {pool.curve_params.max_supply}"
                )

            engine = PricingEngine(pool.curve_params)
            proceeds = engine.quote_for_tokens(amount, pool.token_reserve)
            if proceeds <= ZERO:
                raise InsufficientAmountError(f"sale of {amount} tokens yields {proceeds}")
            if proceeds > pool.sol_reserve:
                raise InsufficientAmountError(
                    f"pool holds {pool.sol_reserve}, sale requires {proceeds}"
                )

            new_reserve = pool.token_reserve + amount
            updated = replace(
                pool,
                sol_reserve=pool.sol_reserve - proceeds,
                token_reserve=new_reserve,
                total_volume=pool.total_volume + proceeds,
                current_price=engine.price(new_reserve),
            )
            verify_pool_invariants(updated)

            receipt = await self._settle(SettlementKind.SELL, pool.id, trader, proceeds, amount)
            working[pool.id] = updated
            await self._commit(working, receipt)

        logger.info(
            "Sell executed: pool=%s trader=%s tokens=%s received=%s new_price=%s",
            pool_id, trader, amount, proceeds, updated.current_price,
        )
        return SellExecuted(
            receipt=receipt,
            quote_received=proceeds,
            new_price=updated.current_price,
            pool=copy.copy(updated),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.refresh()

    async def _load(self) -> dict[str, Pool]:
        try:
            pools = await self._backend.load_all()
        except AppError:
            raise
        except Exception as exc:
            logger.error("Failed to load pools: %s", exc)
            raise PersistenceError(f"load failed: {exc}") from exc
        return {p.id: p for p in pools}

    async def _commit(self, working: dict[str, Pool], receipt: str) -> None:
        try:
            await self._backend.save_all(list(working.values()))
        except asyncio.CancelledError:
            # The backend write may still land; rebuild from it on the next read
            self._loaded = False
            raise
        except Exception as exc:
            # Ledger already issued `receipt`; it has no pool state behind it now
            logger.error("Failed to save pools (receipt %s not committed): %s", receipt, exc)
            raise PersistenceError(str(exc)) from exc
        self._pools = working
        self._loaded = True

    async def _settle(
        self,
        kind: SettlementKind,
        pool_id: str,
        wallet: str,
        quote_amount: Decimal,
        token_amount: Decimal,
    ) -> str:
        try:
            return await self._ledger.settle_trade(
                kind, pool_id, wallet, quote_amount, token_amount
            )
        except LedgerError:
            logger.error("Ledger rejected %s settlement for pool %s", kind.value, pool_id)
            raise
        except Exception as exc:
            logger.error("Ledger failure on %s for pool %s: %s", kind.value, pool_id, exc)
            raise LedgerError(str(exc)) from exc

    def _require_active(self, pools: dict[str, Pool], pool_id: str) -> Pool:
        pool = pools.get(pool_id)
        if pool is None:
            raise NotFoundError(pool_id)
        if not pool.is_active:
            raise InvalidStateError(pool_id, pool.status.value)
        return pool

    def _check_trade_limits(self, amount: Decimal) -> None:
        self._check_quote_precision(amount)
        if amount < self._limits.min_trade_amount:
            raise ValidationError(
                f"Trade amount must be at least {self._limits.min_trade_amount}, got {amount}"
            )
        if amount > self._limits.max_trade_amount:
            raise ValidationError(
                f"Trade amount must be at most {self._limits.max_trade_amount}, got {amount}"
            )

    def _check_quote_precision(self, amount: Decimal) -> None:
        if decimal_places(amount) > self._limits.quote_decimals:
            raise ValidationError(
                f"Quote amount allows at most {self._limits.quote_decimals} decimal places, "
                f"got {amount}"
            )
