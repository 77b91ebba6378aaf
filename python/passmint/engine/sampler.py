"""
Unbiased index sampling over a cryptographically secure random source.
"""

import secrets
from typing import Callable, List, Optional, Sequence, TypeVar

UINT32_MAX = 0xFFFFFFFF

T = TypeVar("T")


def _secure_uint32() -> int:
    """Draw a 32-bit unsigned value from the operating system CSPRNG."""
    return secrets.randbits(32)


class SecureSampler:
    """Draw uniform indices using rejection sampling over 32-bit values."""

    def __init__(self, source: Optional[Callable[[], int]] = None):
        """
        Initialize sampler.

        Args:
            source: Zero-argument callable returning values in [0, UINT32_MAX].
                Defaults to ``secrets.randbits(32)``.
        """
        self._source = source or _secure_uint32
        self.draws = 0

    def random_index(self, bound: int) -> int:
        """
        Return an integer uniformly distributed over [0, bound).

        Draws at or above the largest multiple of ``bound`` that fits in
        32 bits are discarded, so the final modulo carries no bias.

        Args:
            bound: Exclusive upper bound, 1 <= bound <= UINT32_MAX

        Returns:
            Random index

        Raises:
            ValueError: If bound is outside the supported range
        """
        if bound <= 0:
            raise ValueError("Upper bound must be positive")
        if bound > UINT32_MAX:
            raise ValueError(f"Upper bound cannot exceed {UINT32_MAX}")

        limit = (UINT32_MAX // bound) * bound

        while True:
            value = self._source()
            self.draws += 1
            if value < limit:
                return value % bound

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        return items[self.random_index(len(items))]

    def shuffle(self, items: List[T]) -> None:
        """Shuffle a list in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.random_index(i + 1)
            items[i], items[j] = items[j], items[i]
