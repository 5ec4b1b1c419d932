"""Durable store Protocol for the pool collection.

PoolStore treats load_all/save_all as its atomicity boundary: save_all
replaces the whole collection or raises. Implementations must return fresh
Pool objects from load_all (callers mutate what they get back).
"""

from typing import Protocol

from src.lp_pool.domain.models import Pool


class PoolBackendProtocol(Protocol):
    async def load_all(self) -> list[Pool]: ...

    async def save_all(self, pools: list[Pool]) -> None: ...
