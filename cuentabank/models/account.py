"""Account data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from cuentabank.models.exceptions import InsufficientFundsError, InvalidAmountError
from cuentabank.models.money import add, subtract, to_money

if TYPE_CHECKING:
    from cuentabank.models.bank import Bank

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(eq=False)
class Account:
    """Represents a customer's bank account.

    The balance is an exact Decimal and never goes below zero; anything
    assigned to it goes through to_money first. Two accounts are equal when
    their customer names and balances are equal; the owning bank does not
    take part in the comparison.
    """

    customer_name: str
    balance: Decimal
    bank: Bank | None = field(default=None, repr=False)

    def __setattr__(self, name, value):
        if name == "balance":
            value = to_money(value)
            if value < ZERO:
                raise InvalidAmountError(f"Balance cannot be negative: {value}")
            if value.is_zero():
                value = value.copy_abs()
        super().__setattr__(name, value)

    def debit(self, amount) -> None:
        """
        Withdraw an amount from the account.

        Args:
            amount: The amount to withdraw (must not be negative)

        Raises:
            InvalidAmountError: If the amount is negative or not a number
            InsufficientFundsError: If the balance would drop below zero;
                the balance is left unchanged
        """
        amount = _non_negative(amount, "debit")
        remaining = subtract(self.balance, amount)
        if remaining < ZERO:
            logger.info(
                "Rejected debit of %s from %r: balance %s",
                amount, self.customer_name, self.balance,
            )
            raise InsufficientFundsError(balance=self.balance, amount=amount)
        self.balance = remaining
        logger.debug("Debited %s from %r, balance %s", amount, self.customer_name, self.balance)

    def credit(self, amount) -> None:
        """
        Deposit an amount into the account. There is no upper bound.

        Raises:
            InvalidAmountError: If the amount is negative or not a number
        """
        amount = _non_negative(amount, "credit")
        self.balance = add(self.balance, amount)
        logger.debug("Credited %s to %r, balance %s", amount, self.customer_name, self.balance)

    def __eq__(self, other):
        if not isinstance(other, Account):
            return NotImplemented
        if self.customer_name is None or self.balance is None:
            return False
        return self.customer_name == other.customer_name and self.balance == other.balance

    __hash__ = None


def _non_negative(amount, operation: str) -> Decimal:
    amount = to_money(amount)
    if amount < ZERO:
        raise InvalidAmountError(
            f"Cannot {operation} negative amount: {amount}. Amount must be positive."
        )
    return amount
