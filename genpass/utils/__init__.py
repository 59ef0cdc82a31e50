"""
Character set and password generation utilities.
"""

from .charset import build_character_set, describe_character_set, remove_characters, validate_config
from .password_generator import PasswordGenerator, generate_password

__all__ = [
    'build_character_set',
    'describe_character_set',
    'remove_characters',
    'validate_config',
    'PasswordGenerator',
    'generate_password',
]
