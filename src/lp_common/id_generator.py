"""Identifiers for pools, pool addresses, ledger receipts and mints.

Pool ids are UUID4 strings. Receipt and mint suffixes come from a
millisecond clock with a per-millisecond counter, so they are unique within
the process and increase in issue order.
"""

import threading
import time
import uuid

_SEQ_PER_MS = 1_000_000


class TimeOrderedIdGenerator:
    def __init__(self) -> None:
        self._last_ms = 0
        self._seq = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            now = int(time.time() * 1000)
            if now > self._last_ms:
                self._last_ms, self._seq = now, 0
            else:
                # same millisecond, or the wall clock stepped back
                self._seq += 1
                if self._seq == _SEQ_PER_MS:
                    self._last_ms += 1
                    self._seq = 0
            return str(self._last_ms * _SEQ_PER_MS + self._seq)


_receipts = TimeOrderedIdGenerator()


def generate_id() -> str:
    return _receipts.next_id()


def new_pool_id() -> str:
    return str(uuid.uuid4())


def new_pool_address() -> str:
    # Placeholder until pools are backed by an on-chain program account
    return uuid.uuid4().hex + uuid.uuid4().hex[:12]
