"""
Input validation utilities for passmint.
"""

from ..config import MAX_LENGTH, MIN_LENGTH
from ..engine.options import GenerationOptions
from ..exceptions import InvalidLengthError, NoAlphabetSelectedError


def validate_length(length: int, minimum: int = MIN_LENGTH, maximum: int = MAX_LENGTH) -> bool:
    """
    Validate a requested password length against the host range.

    Args:
        length: The length to validate
        minimum: Smallest accepted length
        maximum: Largest accepted length

    Returns:
        True if length is valid, False otherwise
    """
    if not isinstance(length, int) or isinstance(length, bool):
        return False

    return minimum <= length <= maximum


def get_validation_error_message(options: GenerationOptions, length: int) -> str:
    """
    Get a descriptive error message for an invalid request.

    Args:
        options: The requested options
        length: The requested length

    Returns:
        Error message describing what to adjust, or an empty string if valid
    """
    if not options.has_alphabet:
        return ("No character types selected. Please select at least one "
                "character type to include in your password.")

    if not isinstance(length, int) or isinstance(length, bool):
        return "Password length must be a whole number"

    if length < MIN_LENGTH:
        return f"Password length must be at least {MIN_LENGTH}"

    if length > MAX_LENGTH:
        return f"Password length cannot be longer than {MAX_LENGTH}"

    return ""


def check_request(options: GenerationOptions, length: int) -> None:
    """
    Raise if a request should not be passed to the engine.

    Raises:
        NoAlphabetSelectedError: If no character type is selected
        InvalidLengthError: If length is outside the host range
    """
    message = get_validation_error_message(options, length)
    if not message:
        return

    if not options.has_alphabet:
        raise NoAlphabetSelectedError(message, length=length, alphabet_size=0)

    raise InvalidLengthError(message, length=length)
