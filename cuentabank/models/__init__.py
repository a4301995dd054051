"""Data models for the banking domain."""

from .account import Account
from .bank import Bank
from .money import to_money
from .exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "Bank",
    "to_money",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
]
