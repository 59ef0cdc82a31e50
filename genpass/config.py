"""
Configuration for password generation.
"""

from dataclasses import dataclass

# Length presets
LENGTH_WEAK = 6
LENGTH_OK = 12
LENGTH_STRONG = 24
LENGTH_VERY_STRONG = 36

# Base character subsets
LETTER_SET = "abcdefghijklmnopqrstuvwxyz"
NUMBER_SET = "0123456789"
SYMBOL_SET = "!$%^&*()_+{}:@[];'#<>?,./|\\-="

# Removed from letters and numbers when excluding similar characters
LETTER_SIMILAR_SET = "ijlo"
NUMBER_SIMILAR_SET = "01"

# Removed from symbols when excluding ambiguous characters
SYMBOL_AMBIGUOUS_SET = "<>[](){}:;'/|\\,"


@dataclass(frozen=True)
class Config:
    """
    Settings describing which passwords to generate.

    Attributes:
        length: Password length, 0 means LENGTH_STRONG
        character_set: Explicit character set, overrides the include toggles
        include_symbols: Include symbols, e.g. !$%^
        include_numbers: Include digits
        include_lowercase: Include lowercase letters
        include_uppercase: Include uppercase letters
        exclude_similar: Drop look-alike letters and digits (i, l, o, 0, 1...)
        exclude_ambiguous: Drop hard to communicate symbols (<>{}[]()/|\\...)
    """

    length: int = 0
    character_set: str = ""
    include_symbols: bool = False
    include_numbers: bool = False
    include_lowercase: bool = False
    include_uppercase: bool = False
    exclude_similar: bool = False
    exclude_ambiguous: bool = False

    def has_character_source(self) -> bool:
        """Check whether any character source is enabled."""
        return bool(
            self.character_set
            or self.include_symbols
            or self.include_numbers
            or self.include_lowercase
            or self.include_uppercase
        )


def default_config() -> Config:
    """
    Return the default configuration.

    Strong length, every character class enabled, similar and ambiguous
    characters excluded.
    """
    return Config(
        length=LENGTH_STRONG,
        include_symbols=True,
        include_numbers=True,
        include_lowercase=True,
        include_uppercase=True,
        exclude_similar=True,
        exclude_ambiguous=True,
    )
