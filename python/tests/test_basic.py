"""
Basic functionality tests for passmint.
"""

import pytest

from passmint.config import MAX_LENGTH, MIN_LENGTH
from passmint.engine.options import GenerationOptions
from passmint.utils.validation import (
    check_request,
    get_validation_error_message,
    validate_length,
)
from passmint.exceptions import (
    ExhaustedAlphabetError,
    GenerationError,
    InfeasibleConstraintsError,
    InvalidLengthError,
    LengthExceedsAlphabetError,
    NoAlphabetSelectedError,
    PassmintException,
)

NOTHING_SELECTED = GenerationOptions(include_numbers=False, include_lowercase=False,
                                     include_uppercase=False, include_symbols=False)


class TestValidation:
    """Test input validation."""

    def test_valid_lengths(self):
        """Test that lengths inside the host range pass validation."""
        for length in [MIN_LENGTH, 16, 32, MAX_LENGTH]:
            assert validate_length(length), f"Length {length} should be valid"

    def test_invalid_lengths(self):
        """Test that lengths outside the host range fail validation."""
        invalid_lengths = [MIN_LENGTH - 1, MAX_LENGTH + 1, 0, -1, "16", 16.0, True]

        for length in invalid_lengths:
            assert not validate_length(length), f"Length {length!r} should be invalid"

    def test_validation_error_messages(self):
        """Test validation error messages."""
        options = GenerationOptions()

        assert "No character types" in get_validation_error_message(NOTHING_SELECTED, 16)
        assert "at least 6" in get_validation_error_message(options, 3)
        assert "longer than 60" in get_validation_error_message(options, 61)
        assert get_validation_error_message(options, 16) == ""

    def test_check_request(self):
        """Test that invalid requests raise the matching error."""
        check_request(GenerationOptions(), 16)

        with pytest.raises(NoAlphabetSelectedError):
            check_request(NOTHING_SELECTED, 16)

        with pytest.raises(InvalidLengthError) as exc_info:
            check_request(GenerationOptions(), 100)
        assert exc_info.value.length == 100


class TestOptions:
    """Test generation options."""

    def test_defaults(self):
        options = GenerationOptions()

        assert options.include_numbers
        assert options.include_lowercase
        assert options.include_uppercase
        assert not options.include_symbols
        assert not options.exclude_similar
        assert not options.no_duplicates
        assert not options.no_sequential
        assert options.has_alphabet

    def test_symbols_only(self):
        options = GenerationOptions(include_numbers=False, include_lowercase=False,
                                    include_uppercase=False, include_symbols=True)
        assert options.has_alphabet

    def test_frozen(self):
        options = GenerationOptions()
        with pytest.raises(AttributeError):
            options.no_duplicates = True


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        for error in [NoAlphabetSelectedError, InvalidLengthError,
                      LengthExceedsAlphabetError, InfeasibleConstraintsError,
                      ExhaustedAlphabetError]:
            assert issubclass(error, GenerationError)
            assert issubclass(error, PassmintException)

        assert issubclass(InvalidLengthError, ValueError)

    def test_context(self):
        error = LengthExceedsAlphabetError("too long", length=15, alphabet_size=10)

        assert str(error) == "too long"
        assert error.length == 15
        assert error.alphabet_size == 10
        assert error.constraint == "no duplicates"
