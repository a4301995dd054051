"""Bank data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from cuentabank.models.account import Account
from cuentabank.models.exceptions import BankError
from cuentabank.models.money import add

logger = logging.getLogger(__name__)


@dataclass
class Bank:
    """A named bank holding an ordered list of accounts."""

    name: str = ""
    accounts: list[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        """
        Append an account to the bank.

        Duplicates are allowed and the account's ``bank`` attribute is not
        touched. Use :meth:`register` to link both sides.
        """
        self.accounts.append(account)

    def register(self, account: Account) -> None:
        """Append an account and point its ``bank`` back to this bank."""
        self.add_account(account)
        account.bank = self

    def find_account(self, customer_name: str) -> Account | None:
        """
        Find the first account held by a customer.

        Args:
            customer_name: The customer name to search for

        Returns:
            The first matching Account in insertion order, None otherwise
        """
        return next(
            (account for account in self.accounts if account.customer_name == customer_name),
            None,
        )

    @property
    def total_balance(self) -> Decimal:
        """Sum of the balances of every account in the bank."""
        total = Decimal("0")
        for account in self.accounts:
            total = add(total, account.balance)
        return total

    def transfer(self, source: Account, destination: Account, amount) -> None:
        """
        Move funds from one account to another.

        The source is debited first; if that fails the error propagates and
        the destination is never credited, so neither balance changes. If the
        credit fails the debit is undone before the error propagates. The
        accounts do not need to belong to this bank.

        Args:
            source: The account to debit
            destination: The account to credit
            amount: The amount to move

        Raises:
            InsufficientFundsError: If the source cannot cover the amount
            InvalidAmountError: If the amount is negative or not a number,
                or the result cannot be represented exactly
        """
        source.debit(amount)
        try:
            destination.credit(amount)
        except BankError:
            source.credit(amount)
            raise
        logger.debug(
            "%s: transferred %s from %r to %r",
            self.name, amount, source.customer_name, destination.customer_name,
        )
