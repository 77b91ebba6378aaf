"""
Custom exceptions for passmint.
"""

from typing import Optional


class PassmintException(Exception):
    """Base exception for passmint."""

    pass


class GenerationError(PassmintException):
    """A generation request cannot be satisfied with the current settings."""

    constraint = "generation"

    def __init__(self, message: str, length: Optional[int] = None,
                 alphabet_size: Optional[int] = None):
        super().__init__(message)
        self.length = length
        self.alphabet_size = alphabet_size


class NoAlphabetSelectedError(GenerationError):
    """No character types were selected."""

    constraint = "character types"


class InvalidLengthError(GenerationError, ValueError):
    """Requested length is outside the accepted range."""

    constraint = "length"


class LengthExceedsAlphabetError(GenerationError):
    """Duplicates are disallowed but the length exceeds the distinct characters."""

    constraint = "no duplicates"


class InfeasibleConstraintsError(GenerationError):
    """A selected character type cannot be represented in the password."""

    constraint = "character type inclusion"


class ExhaustedAlphabetError(GenerationError):
    """Ran out of usable characters before reaching the requested length."""

    constraint = "alphabet"


class AttemptsExhaustedError(GenerationError):
    """No unique password was produced within the attempt budget."""

    constraint = "attempts"
