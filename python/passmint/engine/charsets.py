"""
Character classes built from generation options.
"""

import string
from dataclasses import dataclass
from typing import Iterator, List

from .options import GenerationOptions

# Visually ambiguous characters removed by exclude_similar (case-sensitive)
SIMILAR_CHARS = frozenset("il1Lo0O")


@dataclass(frozen=True)
class CharacterClass:
    """One selected alphabet, ordered and free of repeats."""

    name: str
    chars: str

    @property
    def is_empty(self) -> bool:
        return not self.chars

    def __len__(self) -> int:
        return len(self.chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def __contains__(self, char: object) -> bool:
        return char in self.chars


def _dedupe(chars: str) -> str:
    return "".join(dict.fromkeys(chars))


def build_character_classes(options: GenerationOptions) -> List[CharacterClass]:
    """
    Expand option flags into character classes.

    Classes come out in a fixed order: digits, lowercase, uppercase, symbols.
    A class emptied by similar-character filtering is kept so callers can
    report it.

    Args:
        options: Generation options

    Returns:
        One CharacterClass per selected flag
    """
    selected = []

    if options.include_numbers:
        selected.append(("digits", string.digits))
    if options.include_lowercase:
        selected.append(("lowercase", string.ascii_lowercase))
    if options.include_uppercase:
        selected.append(("uppercase", string.ascii_uppercase))
    if options.include_symbols:
        selected.append(("symbols", options.symbol_set))

    classes = []
    for name, chars in selected:
        if options.exclude_similar:
            chars = "".join(c for c in chars if c not in SIMILAR_CHARS)
        classes.append(CharacterClass(name, _dedupe(chars)))

    return classes


def full_alphabet(classes: List[CharacterClass]) -> str:
    """Concatenate all classes into the alphabet used for filling."""
    return "".join(cls.chars for cls in classes)


def alphabet_size(classes: List[CharacterClass]) -> int:
    """Count distinct characters across all classes."""
    return len(set(full_alphabet(classes)))


def describe_options(options: GenerationOptions) -> str:
    """
    Get human-readable description of the selected character types.

    Returns:
        Description such as "digits, lowercase (excluding similar chars)"
    """
    parts = [cls.name for cls in build_character_classes(options)]
    info = ", ".join(parts) if parts else "no character types"

    modifiers = []
    if options.exclude_similar:
        modifiers.append("excluding similar chars")
    if options.no_duplicates:
        modifiers.append("no duplicates")
    if options.no_sequential:
        modifiers.append("no sequential chars")

    if modifiers:
        info += f" ({', '.join(modifiers)})"

    return info
