from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Union

SEPARATOR = "-" * 28

PathLike = Union[str, os.PathLike]


def render_statement(
    holder_name: str,
    card_number: int,
    pin: int,
    entries: Iterable[str],
) -> str:
    lines = [
        f"Name: {holder_name}",
        f"Card Number: {card_number}",
        f"PIN: {pin}",
        SEPARATOR,
        *entries,
    ]
    return "\n".join(lines) + "\n"


def write_statement(path: PathLike, text: str) -> Path:
    """Write ``text`` to ``path``, replacing any existing file."""
    target = Path(path)
    with target.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    return target
