"""
CLI interface for passmint password generator.
"""

import logging
import sys
from typing import Any, Callable

import click

from .config import (
    DEFAULT_COUNT,
    DEFAULT_LENGTH,
    DEFAULT_MAX_ATTEMPTS,
    ENV_PREFIX,
    MAX_LENGTH,
    MIN_LENGTH,
)
from .engine import (
    SYMBOLS,
    GenerationOptions,
    StrengthTier,
    alphabet_size,
    build_character_classes,
    describe_options,
    evaluate_strength,
    generate as generate_batch,
    unique_bound,
)
from .exceptions import GenerationError
from .utils.validation import check_request

# Terminal colours per strength tier
TIER_COLORS = {
    StrengthTier.WEAK: "red",
    StrengthTier.FAIR: "yellow",
    StrengthTier.GOOD: "yellow",
    StrengthTier.STRONG: "green",
    StrengthTier.VERY_STRONG: "green",
    StrengthTier.EXTREMELY_STRONG: "cyan",
    StrengthTier.UNBREAKABLE: "magenta",
}


def charset_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the character type and constraint options to a command."""
    decorators = [
        click.option("--length", "-l", default=DEFAULT_LENGTH,
                     type=click.IntRange(MIN_LENGTH, MAX_LENGTH),
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH}, default: {DEFAULT_LENGTH})"),
        click.option("--no-numbers", is_flag=True, help="Exclude digits"),
        click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters"),
        click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters"),
        click.option("--symbols", "-s", is_flag=True, help="Include symbol characters"),
        click.option("--symbol-set", default=SYMBOLS, show_default=True,
                     help="Symbols to draw from when --symbols is set"),
        click.option("--exclude-similar", is_flag=True,
                     help="Exclude similar characters (i, l, 1, L, o, 0, O)"),
        click.option("--no-duplicates", is_flag=True, help="Use every character at most once"),
        click.option("--no-sequential", is_flag=True,
                     help="Disallow neighbouring characters such as 'ab' or '45'"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_options(no_numbers: bool, no_lowercase: bool, no_uppercase: bool,
                  symbols: bool, symbol_set: str, exclude_similar: bool,
                  no_duplicates: bool, no_sequential: bool) -> GenerationOptions:
    """Translate CLI flags into generation options."""
    return GenerationOptions(
        include_numbers=not no_numbers,
        include_lowercase=not no_lowercase,
        include_uppercase=not no_uppercase,
        include_symbols=symbols,
        exclude_similar=exclude_similar,
        no_duplicates=no_duplicates,
        no_sequential=no_sequential,
        symbol_set=symbol_set,
    )


def format_strength(tier: StrengthTier, entropy_bits: float) -> str:
    """Format a strength label like 'Very Strong (127.22 bits)'."""
    return click.style(f"{tier.label} ({entropy_bits:.2f} bits)", fg=TIER_COLORS[tier])


def format_count(value: int) -> str:
    """Format a large count, switching to a power of ten past 10^15."""
    if value < 10 ** 15:
        return f"{value:,}"
    return f"~10^{len(str(value)) - 1}"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """passmint - Generate strong passwords under character constraints."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")


@cli.command()
@charset_options
@click.option("--count", "-n", default=DEFAULT_COUNT, type=click.IntRange(1, 100),
              help=f"Number of passwords (default: {DEFAULT_COUNT})")
@click.option("--max-attempts", default=DEFAULT_MAX_ATTEMPTS, type=click.IntRange(1),
              help=f"Attempts before giving up (default: {DEFAULT_MAX_ATTEMPTS})")
@click.option("--plain", is_flag=True, help="Print passwords only")
def generate(length: int, count: int, max_attempts: int, plain: bool, **flags: Any) -> None:
    """Generate unique passwords."""
    options = build_options(**flags)

    try:
        check_request(options, length)
        batch = generate_batch(options, length, count=count, max_attempts=max_attempts)
    except GenerationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for result in batch:
        if plain:
            click.echo(result.password)
        else:
            click.echo(f"{result.password}  {format_strength(result.strength, result.entropy_bits)}")

    if batch.partial is not None:
        click.echo(f"Warning: {batch.partial.message}", err=True)
        if not batch.results:
            sys.exit(1)


@cli.command()
@charset_options
def info(length: int, **flags: Any) -> None:
    """Show the alphabet and strength for the selected options."""
    options = build_options(**flags)

    try:
        check_request(options, length)
    except GenerationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    classes = build_character_classes(options)
    size = alphabet_size(classes)

    click.echo("Character set:")
    click.echo(f"  Types: {describe_options(options)}")
    for cls in classes:
        status = cls.chars if not cls.is_empty else "(empty)"
        click.echo(f"  {cls.name}: {status}")
    click.echo(f"  Alphabet size: {size}")

    if size == 0:
        click.echo("  Strength: n/a")
        return

    entropy_bits, tier = evaluate_strength(length, size)
    click.echo(f"  Length: {length}")
    click.echo(f"  Strength: {format_strength(tier, entropy_bits)}")
    bound = unique_bound(length, size, options.no_duplicates)
    click.echo(f"  Possible passwords: at most {format_count(bound)}")

    if options.no_duplicates and length > size:
        click.echo(f"  Note: {length} characters without duplicates exceeds the alphabet")


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix=ENV_PREFIX)


if __name__ == "__main__":
    main()
