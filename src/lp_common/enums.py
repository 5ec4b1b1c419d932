"""Global enums: values are what gets persisted and returned over the API."""

from enum import Enum


class PoolStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SettlementKind(str, Enum):
    """What a ledger settlement receipt was issued for."""
    POOL_CREATE = "pool_create"
    BUY = "buy"
    SELL = "sell"


class StoreBackend(str, Enum):
    JSON = "json"
    SQL = "sql"
    MEMORY = "memory"
