"""
Secure password generation utilities.
"""

import logging
import secrets
from typing import Callable, List, Optional

from ..config import Config, LENGTH_STRONG, default_config
from ..exceptions import InvalidCountError, InvalidLengthError, RandomSourceError
from .charset import build_character_set, describe_character_set, validate_config


logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate secure passwords from a configured character set."""

    def __init__(self,
                 config: Optional[Config] = None,
                 random_source: Callable[[int], int] = secrets.randbelow):
        """
        Initialize password generator from a configuration.

        Args:
            config: Generation settings, defaults to default_config()
            random_source: Unbiased randbelow(n) over a secure source

        Raises:
            EmptyConfigurationError: If no character source is enabled
            InvalidLengthError: If the configured length is negative
        """
        if config is None:
            config = default_config()

        validate_config(config)

        self._config = config
        self._character_set = build_character_set(config)
        self._length = config.length or LENGTH_STRONG
        self._random_source = random_source

    @classmethod
    def with_defaults(cls) -> "PasswordGenerator":
        """Create a generator using the default configuration."""
        return cls(default_config())

    @property
    def config(self) -> Config:
        """Configuration the generator was created from."""
        return self._config

    @property
    def character_set(self) -> str:
        """Resolved character set passwords are drawn from."""
        return self._character_set

    @property
    def length(self) -> int:
        """Effective password length, LENGTH_STRONG when the config left it unset."""
        return self._length

    def generate(self) -> str:
        """
        Generate one password with the configured length.

        Returns:
            Generated password string

        Raises:
            RandomSourceError: If the random source fails
        """
        return self.generate_with_length(self._length)

    def generate_many(self, count: int) -> List[str]:
        """
        Generate several passwords with the configured length.

        Args:
            count: Number of passwords

        Returns:
            List of generated passwords

        Raises:
            InvalidCountError: If count is negative
            RandomSourceError: If the random source fails for any password
        """
        return self.generate_many_with_length(count, self._length)

    def generate_with_length(self, length: int) -> str:
        """
        Generate one password with the given length.

        Each character is drawn independently and uniformly, with
        replacement, from the character set.

        Args:
            length: Password length

        Returns:
            Generated password string

        Raises:
            InvalidLengthError: If length is negative
            RandomSourceError: If the random source fails
        """
        if length < 0:
            raise InvalidLengthError(f"Password length cannot be negative: {length}")

        size = len(self._character_set)
        try:
            indexes = [self._random_source(size) for _ in range(length)]
        except (OSError, NotImplementedError) as e:
            logger.error(f"Random source failed: {e}")
            raise RandomSourceError(f"Secure random source unavailable: {e}") from e

        return "".join(self._character_set[i] for i in indexes)

    def generate_many_with_length(self, count: int, length: int) -> List[str]:
        """
        Generate several passwords with the given length.

        Args:
            count: Number of passwords
            length: Password length

        Returns:
            List of generated passwords, never partial

        Raises:
            InvalidCountError: If count is negative
            InvalidLengthError: If length is negative
            RandomSourceError: If the random source fails for any password
        """
        if count < 0:
            raise InvalidCountError(f"Password count cannot be negative: {count}")

        logger.debug(f"Generating {count} password(s) of length {length}")
        return [self.generate_with_length(length) for _ in range(count)]

    def charset_info(self) -> str:
        """Get human-readable description of the character set."""
        return describe_character_set(self._config)


def generate_password(length: int = LENGTH_STRONG,
                      character_set: str = "",
                      include_symbols: bool = True,
                      include_numbers: bool = True,
                      include_lowercase: bool = True,
                      include_uppercase: bool = True,
                      exclude_similar: bool = True,
                      exclude_ambiguous: bool = True) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length
        character_set: Explicit character set, overrides the include toggles
        include_symbols: Include symbols
        include_numbers: Include digits
        include_lowercase: Include lowercase letters
        include_uppercase: Include uppercase letters
        exclude_similar: Exclude visually similar letters and digits
        exclude_ambiguous: Exclude ambiguous symbols

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(Config(
        length=length,
        character_set=character_set,
        include_symbols=include_symbols,
        include_numbers=include_numbers,
        include_lowercase=include_lowercase,
        include_uppercase=include_uppercase,
        exclude_similar=exclude_similar,
        exclude_ambiguous=exclude_ambiguous,
    ))

    return generator.generate()
