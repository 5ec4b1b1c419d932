"""Tests for pool invariant checks."""
from decimal import Decimal

import pytest

from src.lp_common.errors import InvariantViolationError
from src.lp_pool.domain.invariants import pool_invariant_violations, verify_pool_invariants
from tests.factories import make_pool


class TestPoolInvariants:
    def test_consistent_pool_has_no_violations(self) -> None:
        assert pool_invariant_violations(make_pool()) == []

    def test_negative_token_reserve(self) -> None:
        pool = make_pool(token_reserve=Decimal(-1), current_price=Decimal("0.0000009"))
        violations = pool_invariant_violations(pool)
        assert any("token_reserve" in v for v in violations)

    def test_negative_sol_reserve(self) -> None:
        violations = pool_invariant_violations(make_pool(sol_reserve=Decimal("-0.1")))
        assert len(violations) == 1
        assert "sol_reserve" in violations[0]

    def test_negative_volume(self) -> None:
        violations = pool_invariant_violations(make_pool(total_volume=Decimal(-1)))
        assert "total_volume" in violations[0]

    def test_stale_price(self) -> None:
        violations = pool_invariant_violations(make_pool(current_price=Decimal("0.1")))
        assert len(violations) == 1
        assert "current_price" in violations[0]

    def test_price_compared_numerically(self) -> None:
        assert pool_invariant_violations(make_pool(current_price=Decimal("0.1000010"))) == []

    def test_verify_raises_on_violation(self) -> None:
        with pytest.raises(InvariantViolationError) as exc_info:
            verify_pool_invariants(make_pool(sol_reserve=Decimal(-1)))
        assert exc_info.value.code == 9004
        assert exc_info.value.http_status == 500

    def test_verify_passes_consistent_pool(self) -> None:
        verify_pool_invariants(make_pool())
