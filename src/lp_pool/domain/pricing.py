"""Linear bonding-curve pricing.

Pure and deterministic: no I/O, no state beyond the curve parameters.

Buys are quoted at the marginal price *before* the trade, sells at the
marginal price *after* removing the sold amount from supply. The asymmetry
is part of the pricing model and is relied on by stored pools; it is not
an AMM invariant and small round trips are not value-neutral.
"""

from decimal import ROUND_FLOOR, Decimal, localcontext

from src.lp_common.decimals import ZERO, floor_units
from src.lp_pool.domain.models import CurveParams

# Digits used for the buy division so the floor is taken on the exact quotient
_DIVISION_PRECISION = 60


class PricingEngine:
    def __init__(self, curve: CurveParams) -> None:
        self.curve = curve

    def price(self, supply: Decimal) -> Decimal:
        """Marginal price at `supply`: base_price + supply * price_increment."""
        return self.curve.base_price + supply * self.curve.price_increment

    def tokens_for_quote(self, quote_amount: Decimal, current_supply: Decimal) -> Decimal:
        """Whole tokens obtainable for `quote_amount` at price(current_supply).

        Returns 0 (not an error) when the quote amount is below one unit price.
        """
        unit_price = self.price(current_supply)
        if quote_amount <= ZERO:
            return ZERO
        with localcontext() as ctx:
            ctx.prec = _DIVISION_PRECISION
            ctx.rounding = ROUND_FLOOR
            units = quote_amount / unit_price
        return floor_units(units)

    def quote_for_tokens(self, token_amount: Decimal, current_supply: Decimal) -> Decimal:
        """Quote proceeds for selling `token_amount`, priced at price(current_supply - token_amount).

        Does not clamp: callers must ensure token_amount <= current_supply.
        """
        return token_amount * self.price(current_supply - token_amount)
