"""JSON file pool backend: the whole collection lives in one pools.json document."""

import logging
from pathlib import Path

from src.lp_common.json_file import JsonDocumentFile
from src.lp_pool.domain.models import Pool
from src.lp_pool.infrastructure.mappers import pool_to_record, record_to_pool

logger = logging.getLogger(__name__)


class JsonPoolBackend:
    def __init__(self, path: str | Path) -> None:
        self._file = JsonDocumentFile(path)

    @property
    def path(self) -> Path:
        return self._file.path

    async def load_all(self) -> list[Pool]:
        records = await self._file.read()
        return [record_to_pool(r) for r in records]

    async def save_all(self, pools: list[Pool]) -> None:
        await self._file.write([pool_to_record(p) for p in pools])
        logger.debug("Wrote %d pools to %s", len(pools), self._file.path)
