"""Custom exceptions for media-infer."""

from typing import Any


class MediaInferError(Exception):
    """Base exception for media-infer."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(MediaInferError):
    """Validation error."""

    pass


class InvalidFormatNameError(ValidationError, ValueError):
    """Format token does not name a known container."""

    def __init__(self, name: str, supported_names: list[str]) -> None:
        message = f"Failed to parse {name!r}. Supported: {', '.join(supported_names)}"
        super().__init__(message, {"name": name, "supported": supported_names})
        self.name = name


class NotIdentifiedError(MediaInferError):
    """No known container signature matched the buffer."""

    def __init__(self, buffer_length: int, path: str | None = None) -> None:
        if path is None:
            message = f"Could not identify container ({buffer_length} bytes inspected)"
        else:
            message = f"Could not identify container of {path} ({buffer_length} bytes inspected)"
        details: dict[str, Any] = {"buffer_length": buffer_length}
        if path is not None:
            details["path"] = path
        super().__init__(message, details)
        self.buffer_length = buffer_length
        self.path = path


class AcquisitionError(MediaInferError):
    """Bytes could not be obtained from the source."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        cause: OSError | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if path is not None:
            details["path"] = path
        if cause is not None:
            details["cause"] = str(cause)
        super().__init__(message, details)
        self.path = path
        self.cause = cause


class ReadFailureError(AcquisitionError):
    """Reading from an open stream failed."""

    pass


class OpenFailureError(AcquisitionError):
    """A path could not be opened for reading."""

    pass
