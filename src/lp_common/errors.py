"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Validation
  2xxx: Pool
  3xxx: Token
  4xxx: Ledger
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Validation ---

class ValidationError(AppError):
    def __init__(self, detail: str, code: int = 1001, http_status: int = 422) -> None:
        super().__init__(code, detail, http_status)


class WalletRequiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Wallet address required in x-wallet-address header", 1002, 400)


# --- 2xxx: Pool ---

class NotFoundError(AppError):
    def __init__(self, pool_id: str) -> None:
        super().__init__(2001, f"Pool not found: {pool_id}", 404)


class InvalidStateError(AppError):
    def __init__(self, pool_id: str, status: str) -> None:
        super().__init__(2002, f"Pool {pool_id} is not active (status={status})", 422)


class InsufficientAmountError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2003, f"Insufficient amount for trade: {detail}", 422)


# --- 3xxx: Token ---

class TokenNotFoundError(AppError):
    def __init__(self, mint: str) -> None:
        super().__init__(3001, f"Token not found: {mint}", 404)


# --- 4xxx: Ledger ---

class LedgerError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Ledger operation failed: {detail}", 502)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error", code: int = 9002) -> None:
        super().__init__(code, detail, 500)


class PersistenceError(InternalError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to persist state: {detail}", 9003)


class InvariantViolationError(InternalError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invariant violated: {detail}", 9004)
