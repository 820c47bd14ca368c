from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Tuple

from ..core.money import format_amount

if TYPE_CHECKING:
    from .atm import AccountKey, _AccountEntry


class TransactionKind(Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


def format_entry(kind: TransactionKind, amount: Decimal) -> str:
    return f"{kind.value} - Amount: ${format_amount(amount)}"


class Journal(Sequence):
    """Append-only, insertion-ordered log of formatted transaction strings.

    Entries are opaque to the journal; the registry formats them before
    appending. There is no way to edit, reorder or remove an entry.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: List[str] = []

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Journal({self._entries!r})"


class TransactionsView(Mapping):
    """Read-only live view of every journal, keyed by identity.

    The key set tracks registrations as they happen; each value is a tuple
    snapshot of the journal at lookup time.
    """

    def __init__(self, accounts: Dict["AccountKey", "_AccountEntry"]) -> None:
        self._accounts = accounts

    def __getitem__(self, key) -> Tuple[str, ...]:
        return tuple(self._accounts[key].journal)

    def __iter__(self):
        return iter(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)
