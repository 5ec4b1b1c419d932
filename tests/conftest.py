"""Shared fixtures: a PoolStore over an in-memory backend and a simulated ledger."""

import pytest

from src.lp_ledger.infrastructure.simulated import SimulatedLedger
from src.lp_pool.application.store import PoolStore
from src.lp_pool.infrastructure.memory import InMemoryPoolBackend
from tests.factories import CURVE, LIMITS


@pytest.fixture
def ledger() -> SimulatedLedger:
    return SimulatedLedger()


@pytest.fixture
def backend() -> InMemoryPoolBackend:
    return InMemoryPoolBackend()


@pytest.fixture
def store(backend: InMemoryPoolBackend, ledger: SimulatedLedger) -> PoolStore:
    return PoolStore(backend=backend, ledger=ledger, curve=CURVE, limits=LIMITS)
