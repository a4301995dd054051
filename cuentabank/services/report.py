"""Plain-text reports over a bank's accounts."""

from tabulate import tabulate

from cuentabank.models.bank import Bank

HEADER = ['Customer', 'Balance', 'Bank']


def render_accounts(bank: Bank) -> str:
    """
    Render the bank's accounts as a right-aligned text table.

    Rows follow insertion order. Balances are written in plain notation so
    that Decimal('1E+3') shows as 1000.

    Args:
        bank: The bank whose accounts are listed

    Returns:
        The table as a string, header only when the bank has no accounts
    """
    rows = [
        [
            account.customer_name,
            format(account.balance, 'f'),
            account.bank.name if account.bank is not None else '',
        ]
        for account in bank.accounts
    ]
    return tabulate([HEADER] + rows, headers="firstrow", stralign='right', numalign='right',
                    disable_numparse=True)
