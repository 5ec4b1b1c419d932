"""In-process pool backend (tests, STORE_BACKEND=memory)."""

import copy

from src.lp_pool.domain.models import Pool


class InMemoryPoolBackend:
    def __init__(self, pools: list[Pool] | None = None) -> None:
        self._pools: list[Pool] = copy.deepcopy(pools or [])
        self.save_count = 0

    async def load_all(self) -> list[Pool]:
        return copy.deepcopy(self._pools)

    async def save_all(self, pools: list[Pool]) -> None:
        self._pools = copy.deepcopy(pools)
        self.save_count += 1
