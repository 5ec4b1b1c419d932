"""Pool invariant verification before a mutation is committed."""

import logging

from src.lp_common.decimals import ZERO
from src.lp_common.errors import InvariantViolationError
from src.lp_pool.domain.models import Pool
from src.lp_pool.domain.pricing import PricingEngine

logger = logging.getLogger(__name__)


def pool_invariant_violations(pool: Pool) -> list[str]:
    """Return human-readable violations; empty list means the pool is consistent.

    POOL-1: token_reserve >= 0
    POOL-2: sol_reserve >= 0
    POOL-3: total_volume >= 0
    POOL-4: current_price == price(token_reserve)
    """
    violations: list[str] = []
    if pool.token_reserve < ZERO:
        violations.append(f"POOL-1: token_reserve={pool.token_reserve} < 0")
    if pool.sol_reserve < ZERO:
        violations.append(f"POOL-2: sol_reserve={pool.sol_reserve} < 0")
    if pool.total_volume < ZERO:
        violations.append(f"POOL-3: total_volume={pool.total_volume} < 0")
    expected = PricingEngine(pool.curve_params).price(pool.token_reserve)
    if pool.current_price != expected:
        violations.append(
            f"POOL-4: current_price={pool.current_price} != price(token_reserve)={expected}"
        )
    return violations


def verify_pool_invariants(pool: Pool) -> None:
    """Raise InvariantViolationError if `pool` must not be persisted."""
    violations = pool_invariant_violations(pool)
    if violations:
        msg = f"pool={pool.id}: " + "; ".join(violations)
        logger.error("Invariant check failed: %s", msg)
        raise InvariantViolationError(msg)
    logger.debug(
        "Invariants OK: pool=%s, token_reserve=%s, sol_reserve=%s",
        pool.id, pool.token_reserve, pool.sol_reserve,
    )
