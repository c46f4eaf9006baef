"""Write-once store for immutable per-mint facts (token decimals)."""

from __future__ import annotations

import threading


class DecimalsCache:
    """
    Process-wide memo of mint -> decimals.

    Decimals never change after a mint is created, so entries are never
    invalidated. The first value stored for a mint wins.
    """

    def __init__(self) -> None:
        self._values: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, mint: str) -> int | None:
        return self._values.get(mint)

    def put(self, mint: str, decimals: int) -> int:
        """Store decimals for a mint unless already present; return the stored value."""
        with self._lock:
            return self._values.setdefault(mint, decimals)

    def __contains__(self, mint: object) -> bool:
        return mint in self._values

    def __len__(self) -> int:
        return len(self._values)
