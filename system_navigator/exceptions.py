"""
Custom exceptions for the navigator.
"""


class NavigatorError(Exception):
    """Base exception class for navigator errors."""

    pass


class InvalidArgumentError(NavigatorError):
    """Exception raised when command arguments are missing or malformed."""

    pass


class NotFoundError(NavigatorError):
    """Exception raised when a path does not exist."""

    pass


class AlreadyExistsError(NavigatorError):
    """Exception raised when an exclusive create hits an existing path."""

    pass


class UnsupportedOperationError(NavigatorError):
    """Exception raised when a directory is given to a single-file operation."""

    pass


class FileOperationError(NavigatorError):
    """Exception raised for read, write, rename, delete or transform failures."""

    pass


class UnknownCommandError(NavigatorError):
    """Exception raised when a command name is not in the registry."""

    pass


class ConfigurationError(NavigatorError):
    """Exception raised for configuration errors."""

    pass


class HomeDirectoryError(ConfigurationError):
    """Exception raised when the session cannot start in its home directory."""

    pass
