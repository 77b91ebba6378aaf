"""
Entropy and strength estimation.
"""

import math
from functools import total_ordering
from enum import Enum
from typing import Tuple


@total_ordering
class StrengthTier(Enum):
    """Qualitative strength, ordered from weakest to strongest."""

    WEAK = 0
    FAIR = 1
    GOOD = 2
    STRONG = 3
    VERY_STRONG = 4
    EXTREMELY_STRONG = 5
    UNBREAKABLE = 6

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def style_key(self) -> str:
        """Key hosts can use for styling, e.g. ``strength-very-strong``."""
        return "strength-" + self.name.lower().replace("_", "-")

    def __lt__(self, other: "StrengthTier") -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.value < other.value


# Exclusive upper bound in bits for each tier below UNBREAKABLE
TIER_THRESHOLDS = (
    (50, StrengthTier.WEAK),
    (70, StrengthTier.FAIR),
    (90, StrengthTier.GOOD),
    (110, StrengthTier.STRONG),
    (130, StrengthTier.VERY_STRONG),
    (150, StrengthTier.EXTREMELY_STRONG),
)


def calculate_entropy(length: int, alphabet_size: int) -> float:
    """
    Calculate theoretical entropy of a password.

    Args:
        length: Password length
        alphabet_size: Number of distinct characters it was drawn from

    Returns:
        Entropy in bits
    """
    return length * math.log2(alphabet_size)


def strength_tier(entropy_bits: float) -> StrengthTier:
    """Map entropy in bits to a strength tier."""
    for upper, tier in TIER_THRESHOLDS:
        if entropy_bits < upper:
            return tier
    return StrengthTier.UNBREAKABLE


def evaluate_strength(length: int, alphabet_size: int) -> Tuple[float, StrengthTier]:
    """Return entropy bits and tier for a password shape."""
    bits = calculate_entropy(length, alphabet_size)
    return bits, strength_tier(bits)


def unique_bound(length: int, alphabet_size: int, no_duplicates: bool = False) -> int:
    """
    Upper bound on how many distinct passwords a request can produce.

    Counts every string of ``length`` over the alphabet (or every
    arrangement without repeats when ``no_duplicates`` is set). Class
    inclusion and the no-sequential rule only shrink this number.
    """
    if no_duplicates:
        if length > alphabet_size:
            return 0
        return math.perm(alphabet_size, length)
    return alphabet_size ** length
