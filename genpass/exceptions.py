"""
Custom exceptions for genpass.
"""


class GenpassException(Exception):
    """Base exception for genpass."""

    pass


class EmptyConfigurationError(GenpassException):
    """No character source is enabled in the configuration."""

    pass


class InvalidLengthError(GenpassException, ValueError):
    """Password length is negative."""

    pass


class RandomSourceError(GenpassException):
    """The secure random source could not supply entropy."""

    pass


class InvalidCountError(GenpassException, ValueError):
    """Password count is negative."""

    pass
