"""
Constrained password generation engine.

Builds character classes from options, assembles candidates with an unbiased
secure sampler, and collects unique results with strength estimates.
"""

from .options import GenerationOptions, SYMBOLS
from .sampler import SecureSampler, UINT32_MAX
from .charsets import (
    CharacterClass,
    SIMILAR_CHARS,
    alphabet_size,
    build_character_classes,
    describe_options,
    full_alphabet,
)
from .assembler import assemble_candidate, has_sequential_pair
from .strength import (
    StrengthTier,
    calculate_entropy,
    evaluate_strength,
    strength_tier,
    unique_bound,
)
from .batch import BatchResult, GenerationResult, PartialYield, generate, generate_password

__all__ = [
    'GenerationOptions', 'SYMBOLS',
    'SecureSampler', 'UINT32_MAX',
    'CharacterClass', 'SIMILAR_CHARS', 'alphabet_size', 'build_character_classes',
    'describe_options', 'full_alphabet',
    'assemble_candidate', 'has_sequential_pair',
    'StrengthTier', 'calculate_entropy', 'evaluate_strength', 'strength_tier',
    'unique_bound',
    'BatchResult', 'GenerationResult', 'PartialYield', 'generate', 'generate_password',
]
