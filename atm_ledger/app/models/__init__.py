from .schemas import (
    AccountCreate,
    AccountResponse,
    MoneyMovementRequest,
    TransactionsResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "MoneyMovementRequest",
    "TransactionsResponse",
]
