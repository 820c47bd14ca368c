class InvalidArgumentError(ValueError):
    """Raised when the caller passes an identity or amount the ATM rejects."""

class RuntimeFaultError(RuntimeError):
    """Raised when a well-formed request violates a domain rule."""

class AccountNotFoundError(InvalidArgumentError):
    """Raised when a (card, pin) pair is missing from the registry."""

class DuplicateAccountError(InvalidArgumentError):
    """Raised when a (card, pin) pair is registered twice."""

class InvalidAmountError(InvalidArgumentError):
    """Raised when an amount is negative, non-finite or not a number."""

class InsufficientFundsError(RuntimeFaultError):
    """Raised when a withdrawal would drop balance below zero."""
