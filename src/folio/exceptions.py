"""Centralized exceptions for folio."""


class FolioError(Exception):
    """Base exception for all folio errors."""


class ResourceError(FolioError):
    """Base class for errors raised while processing a resource."""


class TypeMismatchError(ResourceError):
    """Raised when a resource is given metadata that is not a ``MetadataMap``."""

    def __init__(self, owner: str, received: str | None = None) -> None:
        self.owner = owner
        self.received = received
        msg = f"{owner} metadata should be of type MetadataMap"
        if received:
            msg = f"{msg}, got {received}"
        super().__init__(msg)


class DateParseError(ResourceError):
    """Raised when the date prefix of a source filename cannot be parsed."""

    def __init__(self, path: str, origin: str, value: str) -> None:
        self.path = path
        self.origin = origin
        self.value = value
        super().__init__(f"Document '{path}' does not have a valid date in the {origin}: '{value}'")


class SourceReadError(ResourceError):
    """Raised when an origin cannot read the raw source of a resource."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read source at '{path}': {reason}")


class TransformError(ResourceError):
    """Raised when the content of a resource cannot be rendered."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to render '{path}': {reason}")


class DestinationNotBoundError(ResourceError):
    """Raised when ``write()`` is called on a resource that has no destination."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Resource '{path}' has no destination. Only resources from collections with output can be written."
        )


class ConfigLoadError(FolioError):
    """Raised when a site configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")


class InvalidHookError(FolioError):
    """Raised when a hook is registered with an unknown priority."""

    def __init__(self, event: str, priority: str) -> None:
        self.event = event
        self.priority = priority
        super().__init__(f"Invalid priority '{priority}' for hook '{event}'")
