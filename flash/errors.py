"""
errors.py - Exception hierarchy
Single responsibility: error types raised by config, storage and services.
"""


class FlashError(Exception):
    """Base class for all application errors."""


class ConfigError(FlashError):
    """The storage root cannot be resolved or created."""


class StorageError(FlashError):
    """A deck or card could not be read, written, renamed or removed."""


class FormatError(StorageError):
    """A card file exists but does not hold a valid card."""


class NameConflictError(StorageError):
    """A deck or card with the requested name already exists."""
