from .atm import AccountKey, Atm
from .journal import Journal, TransactionKind, TransactionsView, format_entry
from .statement import SEPARATOR, render_statement, write_statement

__all__ = [
    "AccountKey",
    "Atm",
    "Journal",
    "SEPARATOR",
    "TransactionKind",
    "TransactionsView",
    "format_entry",
    "render_statement",
    "write_statement",
]
