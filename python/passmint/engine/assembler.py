"""
Assembly of a single password candidate under the selected constraints.
"""

import logging
from typing import List, Optional

from ..exceptions import ExhaustedAlphabetError, InfeasibleConstraintsError
from .charsets import CharacterClass
from .options import GenerationOptions
from .sampler import SecureSampler

logger = logging.getLogger(__name__)


def is_sequential(a: str, b: str) -> bool:
    """True if two characters have code points exactly one apart."""
    return abs(ord(a) - ord(b)) == 1


def has_sequential_pair(candidate: str) -> bool:
    """Check whether any two neighbouring characters are sequential."""
    return any(is_sequential(a, b) for a, b in zip(candidate, candidate[1:]))

def _exhausted(alphabet: str, length: int) -> ExhaustedAlphabetError:
    return ExhaustedAlphabetError(
        "Ran out of characters to use. Adjust your settings or reduce "
        "the password length.",
        length=length,
        alphabet_size=len(set(alphabet)),
    )


def _seed_classes(classes: List[CharacterClass], options: GenerationOptions,
                  sampler: SecureSampler, length: int, used: set) -> List[str]:
    """Pick one character from every class."""
    chars: List[str] = []

    for cls in classes:
        available = [c for c in cls.chars if not (options.no_duplicates and c in used)]

        if not available:
            raise InfeasibleConstraintsError(
                f"Cannot include at least one {cls.name} character due to the "
                "current settings. Adjust your settings.",
                length=length,
                alphabet_size=len(cls),
            )

        char = sampler.choice(available)
        chars.append(char)
        used.add(char)

    return chars


def _fill(chars: List[str], alphabet: str, length: int, options: GenerationOptions,
          sampler: SecureSampler, used: set) -> None:
    """Fill the candidate up to the requested length."""
    while len(chars) < length:
        pool = [c for c in alphabet if not (options.no_duplicates and c in used)]

        if not pool:
            raise _exhausted(alphabet, length)

        char = sampler.choice(pool)
        chars.append(char)
        used.add(char)


def _neighbours(slots: List[Optional[str]], position: int) -> List[str]:
    """Characters already placed next to a position."""
    around = []
    if position > 0 and slots[position - 1] is not None:
        around.append(slots[position - 1])
    if position + 1 < len(slots) and slots[position + 1] is not None:
        around.append(slots[position + 1])
    return around


def _place_non_sequential(classes: List[CharacterClass], alphabet: str, length: int,
                          options: GenerationOptions, sampler: SecureSampler,
                          used: set) -> Optional[str]:
    """
    Build a candidate with no neighbouring code points.

    Class representatives go to random positions first, then the remaining
    positions are filled left to right. Every draw skips characters sequential
    to a placed left or right neighbour, so the finished candidate needs no
    shuffle.

    Returns:
        None if some position has no usable character left
    """
    slots: List[Optional[str]] = [None] * length
    positions = list(range(length))
    sampler.shuffle(positions)

    for cls, position in zip(classes, positions):
        available = [c for c in cls.chars if not (options.no_duplicates and c in used)]

        if not available:
            raise InfeasibleConstraintsError(
                f"Cannot include at least one {cls.name} character due to the "
                "current settings. Adjust your settings.",
                length=length,
                alphabet_size=len(cls),
            )

        around = _neighbours(slots, position)
        available = [c for c in available if not any(is_sequential(n, c) for n in around)]
        if not available:
            logger.debug(f"No non-sequential {cls.name} character for position {position}")
            return None

        slots[position] = sampler.choice(available)
        used.add(slots[position])

    for position in range(length):
        if slots[position] is not None:
            continue

        pool = [c for c in alphabet if not (options.no_duplicates and c in used)]
        if not pool:
            raise _exhausted(alphabet, length)

        around = _neighbours(slots, position)
        pool = [c for c in pool if not any(is_sequential(n, c) for n in around)]
        if not pool:
            logger.debug(f"No non-sequential character left for position {position}")
            return None

        slots[position] = sampler.choice(pool)
        used.add(slots[position])

    return "".join(slots)


def assemble_candidate(classes: List[CharacterClass], alphabet: str, length: int,
                       options: GenerationOptions,
                       sampler: SecureSampler) -> Optional[str]:
    """
    Build one password candidate.

    One character from each class is placed first, the remaining positions
    are drawn from the full alphabet, and the result is shuffled so class
    representatives are not clustered at the front. With ``no_sequential``
    the representatives are placed at random positions instead and each
    draw avoids both neighbours.

    Args:
        classes: Selected character classes
        alphabet: Concatenation of all classes
        length: Exact candidate length
        options: Generation options
        sampler: Random index source

    Returns:
        The candidate, or None if the no-sequential rule left a position
        without a usable character and another attempt may succeed

    Raises:
        InfeasibleConstraintsError: If a class has no usable character
        ExhaustedAlphabetError: If filling runs out of characters
    """
    used: set = set()

    if options.no_sequential:
        return _place_non_sequential(classes, alphabet, length, options, sampler, used)

    chars = _seed_classes(classes, options, sampler, length, used)
    _fill(chars, alphabet, length, options, sampler, used)
    sampler.shuffle(chars)

    return "".join(chars)
