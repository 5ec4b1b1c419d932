"""Whole-document JSON file used by the json store backends.

Readers never observe a half-written file: writes go to a temp file in the
same directory and are moved into place with os.replace.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any


class JsonDocumentFile:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def read(self) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._read_sync)

    async def write(self, records: list[dict[str, Any]]) -> None:
        await asyncio.to_thread(self._write_sync, records)

    def _read_sync(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not contain a JSON list")
        return data

    def _write_sync(self, records: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
