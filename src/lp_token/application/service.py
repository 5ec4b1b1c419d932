"""TokenService: token registry backed by the Ledger for minting.

create_token mints first, then records metadata, and returns the token
together with the mint transaction receipt. A failed save after a
successful mint surfaces as PersistenceError with the orphaned mint id
logged; nothing is recorded locally in that case.
"""

import asyncio
import copy
import logging
import uuid
from decimal import Decimal

from src.lp_common.datetime_utils import utc_now
from src.lp_common.decimals import ZERO, to_decimal
from src.lp_common.errors import (
    AppError,
    LedgerError,
    PersistenceError,
    TokenNotFoundError,
    ValidationError,
)
from src.lp_ledger.domain.protocol import LedgerProtocol, MintResult
from src.lp_token.domain.models import TokenCreated, TokenMetadata
from src.lp_token.domain.repository import TokenBackendProtocol

logger = logging.getLogger(__name__)


class TokenService:
    def __init__(
        self,
        backend: TokenBackendProtocol,
        ledger: LedgerProtocol,
        max_decimals: int = 9,
    ) -> None:
        self._backend = backend
        self._ledger = ledger
        self._max_decimals = max_decimals
        self._tokens: dict[str, TokenMetadata] = {}   # keyed by mint
        self._loaded = False
        self._write_lock = asyncio.Lock()

    async def create_token(
        self,
        name: str,
        symbol: str,
        decimals: int,
        initial_supply: object,
        creator: str,
        description: str | None = None,
        image: str | None = None,
    ) -> TokenCreated:
        name, symbol, creator = self._validate(name, symbol, decimals, creator)
        try:
            supply = to_decimal(initial_supply)
        except ValueError:
            raise ValidationError(f"Initial supply must be a number, got {initial_supply!r}") from None
        if supply <= ZERO:
            raise ValidationError("Initial supply must be greater than 0")

        async with self._write_lock:
            working = await self._load()
            minted = await self._mint(name, symbol, decimals, supply, creator)
            mint = minted.mint
            token = TokenMetadata(
                id=str(uuid.uuid4()),
                mint=mint,
                name=name,
                symbol=symbol,
                decimals=decimals,
                total_supply=supply,
                creator=creator,
                created_at=utc_now(),
                description=description,
                image=image,
            )
            working[mint] = token
            try:
                await self._backend.save_all(list(working.values()))
            except Exception as exc:
                logger.error("Failed to save tokens (mint %s not recorded): %s", mint, exc)
                raise PersistenceError(str(exc)) from exc
            self._tokens = working
            self._loaded = True

        logger.info(
            "Token created: %s (%s) mint=%s tx=%s creator=%s",
            name, symbol, mint, minted.receipt, creator,
        )
        return TokenCreated(token=copy.copy(token), receipt=minted.receipt)

    async def get_token(self, mint: str) -> TokenMetadata:
        await self._ensure_loaded()
        token = self._tokens.get(mint)
        if token is None:
            raise TokenNotFoundError(mint)
        return copy.copy(token)

    async def list_tokens(self, creator: str | None = None) -> list[TokenMetadata]:
        await self._ensure_loaded()
        return [
            copy.copy(t)
            for t in self._tokens.values()
            if creator is None or t.creator == creator
        ]

    async def refresh(self) -> None:
        async with self._write_lock:
            self._tokens = await self._load()
            self._loaded = True

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.refresh()

    async def _load(self) -> dict[str, TokenMetadata]:
        try:
            tokens = await self._backend.load_all()
        except Exception as exc:
            raise PersistenceError(f"load failed: {exc}") from exc
        return {t.mint: t for t in tokens}

    async def _mint(
        self, name: str, symbol: str, decimals: int, supply: Decimal, owner: str
    ) -> MintResult:
        try:
            return await self._ledger.mint_token(name, symbol, decimals, supply, owner)
        except AppError:
            raise
        except Exception as exc:
            logger.error("Ledger failed to mint %s: %s", symbol, exc)
            raise LedgerError(str(exc)) from exc

    def _validate(
        self, name: str, symbol: str, decimals: int, creator: str
    ) -> tuple[str, str, str]:
        if not name or not name.strip():
            raise ValidationError("Token name is required")
        if not symbol or not symbol.strip():
            raise ValidationError("Token symbol is required")
        if not creator or not creator.strip():
            raise ValidationError("creator is required")
        if isinstance(decimals, bool) or not isinstance(decimals, int):
            raise ValidationError(f"Decimals must be an integer, got {decimals!r}")
        if not (0 <= decimals <= self._max_decimals):
            raise ValidationError(f"Decimals must be between 0 and {self._max_decimals}")
        return name.strip(), symbol.strip(), creator.strip()
