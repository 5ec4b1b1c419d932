"""FastAPI dependencies for caller identity and wired services.

The wallet address is taken from the `x-wallet-address` header as-is.
Signature verification happens outside this service.

Usage:
    @router.post("/buy")
    async def buy(wallet: Annotated[str, Depends(get_wallet_address)]): ...
"""

from fastapi import Header, Request

from src.lp_common.errors import WalletRequiredError
from src.services import Services


async def get_wallet_address(
    x_wallet_address: str | None = Header(default=None),
) -> str:
    """Return the caller's wallet address; raise WalletRequiredError (400) if absent."""
    if x_wallet_address is None or not x_wallet_address.strip():
        raise WalletRequiredError()
    return x_wallet_address.strip()


def get_services(request: Request) -> Services:
    return request.app.state.services
