from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Dict, NamedTuple

from ..core.errors import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidArgumentError,
)
from ..core.money import Amount, add, format_amount, subtract, to_decimal
from ..models import AccountResponse
from .journal import Journal, TransactionKind, TransactionsView, format_entry
from .statement import PathLike, render_statement, write_statement


logger = logging.getLogger(__name__)


class AccountKey(NamedTuple):
    card_number: int
    pin: int


@dataclass
class _AccountEntry:
    holder_name: str
    balance: Decimal
    journal: Journal = field(default_factory=Journal)


class Atm:
    """In-memory registry of accounts keyed by (card number, pin).

    Every mutating call validates identity, then amount sign, then funds, and
    only touches the account once all checks pass. Not thread-safe; callers
    sharing an instance across threads must serialize access themselves.
    """

    def __init__(self) -> None:
        self._accounts: Dict[AccountKey, _AccountEntry] = {}

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_entry(self, card_number: int, pin: int) -> _AccountEntry:
        try:
            return self._accounts[AccountKey(card_number, pin)]
        except KeyError as exc:
            logger.debug("account.lookup.miss", extra={"card_number": card_number})
            raise AccountNotFoundError(
                f"No account for card {card_number} with the given PIN"
            ) from exc

    def _non_negative_amount(self, value: Amount, what: str) -> Decimal:
        amount = to_decimal(value)
        if amount < 0:
            logger.debug("amount.rejected", extra={"what": what, "amount": str(amount)})
            raise InvalidAmountError(f"{what} cannot be negative")
        return amount

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def register_account(
        self,
        card_number: int,
        pin: int,
        holder_name: str,
        initial_balance: Amount,
    ) -> None:
        key = AccountKey(card_number, pin)
        if key in self._accounts:
            logger.debug("account.register.duplicate", extra={"card_number": card_number})
            raise DuplicateAccountError(
                f"An account for card {card_number} with this PIN already exists"
            )
        if card_number < 0 or pin < 0:
            raise InvalidArgumentError("Card number and PIN must be non-negative")
        if not holder_name:
            raise InvalidArgumentError("Holder name cannot be empty")
        balance = self._non_negative_amount(initial_balance, "Initial balance")

        self._accounts[key] = _AccountEntry(holder_name=holder_name, balance=balance)
        logger.info(
            "account.registered",
            extra={"card_number": card_number, "holder_name": holder_name},
        )

    def deposit_cash(self, card_number: int, pin: int, amount: Amount) -> None:
        entry = self._get_entry(card_number, pin)
        value = self._non_negative_amount(amount, "Deposit amount")

        new_balance = add(entry.balance, value)
        line = format_entry(TransactionKind.DEPOSIT, value)

        entry.balance = new_balance
        entry.journal.append(line)
        logger.info(
            "account.deposit",
            extra={
                "card_number": card_number,
                "amount": format_amount(value),
                "balance": format_amount(entry.balance),
            },
        )

    def withdraw_cash(self, card_number: int, pin: int, amount: Amount) -> None:
        entry = self._get_entry(card_number, pin)
        value = self._non_negative_amount(amount, "Withdrawal amount")
        if value > entry.balance:
            logger.debug(
                "account.withdraw.overdraft",
                extra={"card_number": card_number, "amount": format_amount(value)},
            )
            raise InsufficientFundsError("Insufficient funds for withdrawal")

        new_balance = subtract(entry.balance, value)
        line = format_entry(TransactionKind.WITHDRAWAL, value)

        entry.balance = new_balance
        entry.journal.append(line)
        logger.info(
            "account.withdraw",
            extra={
                "card_number": card_number,
                "amount": format_amount(value),
                "balance": format_amount(entry.balance),
            },
        )

    def check_balance(self, card_number: int, pin: int) -> float:
        return float(self._get_entry(card_number, pin).balance)

    def get_account(self, card_number: int, pin: int) -> AccountResponse:
        entry = self._get_entry(card_number, pin)
        return AccountResponse(
            card_number=card_number,
            holder_name=entry.holder_name,
            balance=float(entry.balance),
        )

    def render_statement(self, card_number: int, pin: int) -> str:
        entry = self._get_entry(card_number, pin)
        return render_statement(entry.holder_name, card_number, pin, entry.journal)

    def print_ledger(self, path: PathLike, card_number: int, pin: int) -> Path:
        text = self.render_statement(card_number, pin)
        target = write_statement(path, text)
        logger.info(
            "ledger.printed",
            extra={"card_number": card_number, "path": str(target)},
        )
        return target

    def get_transactions(self) -> TransactionsView:
        return TransactionsView(self._accounts)

    def __contains__(self, key: object) -> bool:
        return key in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
