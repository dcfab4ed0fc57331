"""Per-run element and class id generation."""

from __future__ import annotations

import random

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_WIDTH = 6
_LOW = 36 ** (_WIDTH - 1)
_HIGH = 36 ** _WIDTH


def _base36(value: int) -> str:
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits)) or "0"


class IdGenerator:
    """Monotonic six-character base-36 ids, unique within one conversion.

    The starting point is random so that output pasted from two separate
    runs is unlikely to collide; pass *seed* for reproducible ids.
    """

    def __init__(self, seed: int | None = None) -> None:
        rng = random.Random(seed)
        # Leave headroom so the counter never widens past six characters.
        self._next = rng.randrange(_LOW, _HIGH - 1_000_000)
        self._issued = 0

    def __call__(self) -> str:
        value = self._next
        self._next += 1
        self._issued += 1
        return _base36(value)

    @property
    def issued(self) -> int:
        return self._issued
