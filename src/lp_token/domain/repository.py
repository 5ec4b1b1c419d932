"""Token registry store Protocol: same whole-collection contract as pools."""

from typing import Protocol

from src.lp_token.domain.models import TokenMetadata


class TokenBackendProtocol(Protocol):
    async def load_all(self) -> list[TokenMetadata]: ...

    async def save_all(self, tokens: list[TokenMetadata]) -> None: ...
