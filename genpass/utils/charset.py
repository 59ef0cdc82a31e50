"""
Character set assembly for password generation.
"""

import logging

from ..config import (
    Config,
    LETTER_SET,
    LETTER_SIMILAR_SET,
    NUMBER_SET,
    NUMBER_SIMILAR_SET,
    SYMBOL_SET,
    SYMBOL_AMBIGUOUS_SET,
)
from ..exceptions import EmptyConfigurationError, InvalidLengthError


logger = logging.getLogger(__name__)


def remove_characters(text: str, characters: str) -> str:
    """Return text without any of the given characters, order preserved."""
    return "".join(c for c in text if c not in characters)


def validate_config(config: Config) -> None:
    """
    Validate a configuration before building its character set.

    Args:
        config: Configuration to validate

    Raises:
        EmptyConfigurationError: If no character source is enabled
        InvalidLengthError: If the length is negative
    """
    if not config.has_character_source():
        raise EmptyConfigurationError(
            "Configuration is empty: supply a character set or enable at least one character type"
        )

    if config.length < 0:
        raise InvalidLengthError(f"Password length cannot be negative: {config.length}")


def build_character_set(config: Config) -> str:
    """
    Build the character set described by a configuration.

    An explicit character set is used verbatim. Otherwise the enabled
    subsets are joined in the order lowercase, uppercase, numbers, symbols.
    Exclusions apply to each subset as it is added, never to the joined
    result.

    Args:
        config: Validated configuration

    Returns:
        Character set string
    """
    if config.character_set:
        logger.debug(f"Using explicit character set ({len(config.character_set)} chars)")
        return config.character_set

    parts = []

    if config.include_lowercase:
        subset = LETTER_SET
        if config.exclude_similar:
            subset = remove_characters(subset, LETTER_SIMILAR_SET)
        parts.append(subset)

    if config.include_uppercase:
        subset = LETTER_SET.upper()
        if config.exclude_similar:
            subset = remove_characters(subset, LETTER_SIMILAR_SET.upper())
        parts.append(subset)

    if config.include_numbers:
        subset = NUMBER_SET
        if config.exclude_similar:
            subset = remove_characters(subset, NUMBER_SIMILAR_SET)
        parts.append(subset)

    if config.include_symbols:
        subset = SYMBOL_SET
        if config.exclude_ambiguous:
            subset = remove_characters(subset, SYMBOL_AMBIGUOUS_SET)
        parts.append(subset)

    character_set = "".join(parts)
    logger.debug(f"Built character set ({len(character_set)} chars)")
    return character_set


def describe_character_set(config: Config) -> str:
    """
    Get human-readable description of the character set.

    Args:
        config: Configuration to describe

    Returns:
        Description of enabled character types
    """
    if config.character_set:
        return f"custom ({len(config.character_set)} chars)"

    parts = []

    if config.include_lowercase:
        parts.append("lowercase")
    if config.include_uppercase:
        parts.append("uppercase")
    if config.include_numbers:
        parts.append("numbers")
    if config.include_symbols:
        parts.append("symbols")

    info = ", ".join(parts)

    exclusions = []
    if config.exclude_similar and (
        config.include_lowercase or config.include_uppercase or config.include_numbers
    ):
        exclusions.append("similar")
    if config.exclude_ambiguous and config.include_symbols:
        exclusions.append("ambiguous")

    if exclusions:
        info += f" (excluding {' and '.join(exclusions)} chars)"

    return info
