"""
Exception classes for aoide-bridge.

This module defines all custom exceptions used throughout the package.
Each exception is designed to provide a clear, actionable error message
and to distinguish between different failure modes.

Exception Hierarchy:
    AoideBridgeError (base)
        ConfigError - Configuration file issues
        EntityImportError - A single entity could not be imported
            UnsupportedLocatorError - Content URL is not a local file URL
            MissingFieldError - A required field is absent
        SynchronizationConflictError - Settings change while synchronizing
        CollectionStateError - Invalid use of the collection session

All errors are recoverable from the caller's point of view. Batch imports
catch EntityImportError per entity and continue with the next one.
"""


class AoideBridgeError(Exception):
    """
    Base exception for all aoide-bridge errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all aoide-bridge errors with a single
    except clause if desired.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g. entity uid, URL).

    Example:
        try:
            track = import_track_from_entity(entity, missing_title)
        except AoideBridgeError as e:
            logger.error(f"Import failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional context about the error.
                     Common keys include:
                     - 'uid': Entity uid involved in the error
                     - 'url': Content or root URL that caused the error
                     - 'field': Name of the missing field
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(AoideBridgeError):
    """
    Raised when there's an issue with the configuration file.

    This is a CRITICAL error that should stop program execution.

    Common causes:
        - config.yaml not found
        - config.yaml has invalid YAML syntax
        - Required fields missing (storage.directory)
        - Invalid field values (e.g. non-positive pool size)
    """
    pass


class EntityImportError(AoideBridgeError):
    """
    Raised when a single track or playlist entity cannot be imported.

    This is a NON-CRITICAL error. It aborts the import of one entity
    only; batch imports log it and continue with the next entity.
    """
    pass


class UnsupportedLocatorError(EntityImportError):
    """
    Raised when a content URL cannot be converted into a local file path.

    Common causes:
        - URL scheme is not 'file' (e.g. 'https://...')
        - URL names a remote host
        - URL is not absolute

    Example:
        raise UnsupportedLocatorError(
            "unsupported content URL: https://example.com/a.mp3",
            details={'url': 'https://example.com/a.mp3'}
        )
    """
    pass


class MissingFieldError(EntityImportError):
    """
    Raised when a required field of an entity is absent.

    Attributes:
        field: Name of the missing field ('content_url' or 'title').
    """

    def __init__(self, message: str, field: str, details: dict | None = None) -> None:
        super().__init__(message, {"field": field, **(details or {})})
        self.field = field


class SynchronizationConflictError(AoideBridgeError):
    """
    Raised when collection settings are changed while synchronizing.

    This is a hard precondition, not a transient race: the caller has
    to wait until the synchronization has finished before retrying.
    """
    pass


class CollectionStateError(AoideBridgeError):
    """
    Raised on invalid use of the collection session or its state.

    Common causes:
        - Command invoked after the session was closed
        - finish_synchronizing() without a running synchronization
    """
    pass
