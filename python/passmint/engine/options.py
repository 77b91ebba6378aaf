"""
Generation options shared by the engine and its hosts.
"""

from dataclasses import dataclass

# Fixed symbol alphabet (29 characters)
SYMBOLS = '!@#$%^&*()-_=+[]{}|;:",.<>/?~'


@dataclass(frozen=True)
class GenerationOptions:
    """
    Character types and structural constraints for one request.

    Args:
        include_numbers: Include digits
        include_lowercase: Include lowercase letters
        include_uppercase: Include uppercase letters
        include_symbols: Include symbol characters
        exclude_similar: Drop visually ambiguous characters (i, l, 1, L, o, 0, O)
        no_duplicates: Every character appears at most once
        no_sequential: No two neighbours have code points one apart
        symbol_set: Symbols used when include_symbols is set
    """

    include_numbers: bool = True
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_symbols: bool = False
    exclude_similar: bool = False
    no_duplicates: bool = False
    no_sequential: bool = False
    symbol_set: str = SYMBOLS

    @property
    def has_alphabet(self) -> bool:
        """True if at least one character type is selected."""
        return (self.include_numbers or self.include_lowercase
                or self.include_uppercase or self.include_symbols)
