"""
Batch generation of unique passwords under a bounded retry budget.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..config import DEFAULT_COUNT, DEFAULT_MAX_ATTEMPTS
from ..exceptions import (
    AttemptsExhaustedError,
    InfeasibleConstraintsError,
    InvalidLengthError,
    LengthExceedsAlphabetError,
    NoAlphabetSelectedError,
)
from .assembler import assemble_candidate
from .charsets import alphabet_size, build_character_classes, full_alphabet
from .options import GenerationOptions
from .sampler import SecureSampler
from .strength import StrengthTier, evaluate_strength

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """An accepted password with its strength estimate."""

    password: str
    entropy_bits: float
    strength: StrengthTier


@dataclass(frozen=True)
class PartialYield:
    """Fewer unique passwords than requested were produced."""

    requested: int
    produced: int
    attempts: int
    collisions: int
    rejections: int
    length: int
    alphabet_size: int

    @property
    def message(self) -> str:
        return (
            f"Could only generate {self.produced} of {self.requested} unique "
            f"passwords after {self.attempts} attempts. Adjust your settings "
            "or reduce the password length."
        )


@dataclass
class BatchResult:
    """Passwords produced by one request, plus a partial-yield condition if any."""

    results: List[GenerationResult] = field(default_factory=list)
    partial: Optional[PartialYield] = None
    attempts: int = 0

    @property
    def complete(self) -> bool:
        return self.partial is None

    @property
    def passwords(self) -> List[str]:
        return [result.password for result in self.results]

    def __iter__(self) -> Iterator[GenerationResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


def generate(options: GenerationOptions,
             length: int,
             count: int = DEFAULT_COUNT,
             max_attempts: int = DEFAULT_MAX_ATTEMPTS,
             sampler: Optional[SecureSampler] = None) -> BatchResult:
    """
    Generate up to ``count`` distinct passwords.

    Feasibility is checked before any random draw. Structural failures abort
    the whole batch on first occurrence; duplicate candidates and candidates
    rejected by the no-sequential rule are retried until ``max_attempts``
    runs out.

    Args:
        options: Character types and constraints
        length: Password length
        count: Number of unique passwords wanted
        max_attempts: Upper bound on assembly attempts
        sampler: Random index source (a fresh SecureSampler by default)

    Returns:
        BatchResult; ``partial`` is set if fewer than ``count`` were produced

    Raises:
        NoAlphabetSelectedError: If no character type is selected
        InvalidLengthError: If length is not positive
        LengthExceedsAlphabetError: If no_duplicates cannot hold the length
        InfeasibleConstraintsError: If a character type cannot be included
        ExhaustedAlphabetError: If filling runs out of characters
    """
    if not options.has_alphabet:
        raise NoAlphabetSelectedError(
            "No character types selected. Please select at least one character "
            "type to include in your password.",
            length=length,
            alphabet_size=0,
        )

    if length < 1:
        raise InvalidLengthError("Password length must be at least 1", length=length)

    if count < 1:
        raise ValueError("Count must be at least 1")

    if max_attempts < 1:
        raise ValueError("Max attempts must be at least 1")

    classes = build_character_classes(options)
    alphabet = full_alphabet(classes)
    size = alphabet_size(classes)

    for cls in classes:
        if cls.is_empty:
            raise InfeasibleConstraintsError(
                f"The {cls.name} character type has no characters left with the "
                "current settings. Adjust your settings.",
                length=length,
                alphabet_size=size,
            )

    if options.no_duplicates and length > size:
        raise LengthExceedsAlphabetError(
            f"Cannot generate a {length}-character password without duplicates "
            f"from {size} available characters. Please reduce the password "
            "length or adjust your settings.",
            length=length,
            alphabet_size=size,
        )

    if length < len(classes):
        raise InfeasibleConstraintsError(
            f"Cannot include all {len(classes)} selected character types in a "
            f"{length}-character password. Increase the length or select fewer "
            "types.",
            length=length,
            alphabet_size=size,
        )

    sampler = sampler or SecureSampler()
    entropy_bits, tier = evaluate_strength(length, size)

    accepted: set = set()
    results: List[GenerationResult] = []
    attempts = 0
    collisions = 0
    rejections = 0

    while len(results) < count and attempts < max_attempts:
        attempts += 1

        candidate = assemble_candidate(classes, alphabet, length, options, sampler)

        if candidate is None:
            rejections += 1
            continue

        if candidate in accepted:
            collisions += 1
            logger.debug(f"Discarded duplicate candidate on attempt {attempts}")
            continue

        accepted.add(candidate)
        results.append(GenerationResult(candidate, entropy_bits, tier))

    partial = None
    if len(results) < count:
        partial = PartialYield(
            requested=count,
            produced=len(results),
            attempts=attempts,
            collisions=collisions,
            rejections=rejections,
            length=length,
            alphabet_size=size,
        )
        logger.warning(
            f"Partial yield: {len(results)}/{count} passwords after {attempts} attempts "
            f"({collisions} duplicates, {rejections} sequential rejections)"
        )
    else:
        logger.debug(f"Generated {count} passwords in {attempts} attempts")

    return BatchResult(results=results, partial=partial, attempts=attempts)


def generate_password(length: int = 16, **flags) -> str:
    """
    Convenience function to generate a single password.

    Args:
        length: Password length
        **flags: GenerationOptions fields

    Returns:
        Generated password string

    Raises:
        AttemptsExhaustedError: If every attempt was rejected
    """
    batch = generate(GenerationOptions(**flags), length, count=1)
    if not batch.results:
        raise AttemptsExhaustedError(batch.partial.message, length=length,
                                     alphabet_size=batch.partial.alphabet_size)
    return batch.results[0].password
