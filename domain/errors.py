"""
Domain Errors

Exception taxonomy shared by the service and repository layers.
"""


class MotoRecsError(Exception):
    """Base class for all application errors."""


class InvalidAddOnLabel(MotoRecsError, ValueError):
    """Raised when an add-on label is not one of the fixed add-on labels."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown add-on label: {label!r}")


class CatalogParseError(MotoRecsError):
    """Raised when a manufacturer catalog document cannot be parsed.

    The underlying exception is kept on ``cause`` and chained via ``from``.
    """

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Failed to parse catalog {source}: {cause}")


class StorageUnavailable(MotoRecsError):
    """Raised when the build store cannot be opened or reached.

    Nothing is retried automatically; callers may retry the whole operation.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Build store unavailable during {operation}{detail}")
