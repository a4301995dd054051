"""Custom exceptions for the banking domain."""

from decimal import Decimal


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a debit would leave an account with a negative balance."""

    default_message = "Dinero Insuficiente"

    def __init__(
        self,
        message: str = default_message,
        balance: Decimal | None = None,
        amount: Decimal | None = None,
    ):
        super().__init__(message)
        self.balance = balance
        self.amount = amount


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., negative or not a number)."""
    pass
