"""
genpass - secure random password generator.
"""

from .config import (
    Config,
    default_config,
    LENGTH_WEAK,
    LENGTH_OK,
    LENGTH_STRONG,
    LENGTH_VERY_STRONG,
)
from .exceptions import (
    GenpassException,
    EmptyConfigurationError,
    InvalidLengthError,
    InvalidCountError,
    RandomSourceError,
)
from .utils.password_generator import PasswordGenerator, generate_password

__version__ = "1.0.0"

__all__ = [
    'Config',
    'default_config',
    'LENGTH_WEAK',
    'LENGTH_OK',
    'LENGTH_STRONG',
    'LENGTH_VERY_STRONG',
    'GenpassException',
    'EmptyConfigurationError',
    'InvalidLengthError',
    'InvalidCountError',
    'RandomSourceError',
    'PasswordGenerator',
    'generate_password',
]
