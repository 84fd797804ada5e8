"""Read the leading bytes of a file and classify them."""

import logging
import os
from typing import BinaryIO

import structlog

from media_infer.config import get_settings
from media_infer.core.classifier import classify_bytes
from media_infer.formats import ContainerType
from media_infer.utils.exceptions import OpenFailureError, ReadFailureError

# stdlib-backed so nothing reaches stdout before configure_logging() runs
logger = structlog.wrap_logger(logging.getLogger(__name__))


def _stream_name(stream: BinaryIO) -> str | None:
    name = getattr(stream, "name", None)
    return name if isinstance(name, str) else None


def read_prefix(
    stream: BinaryIO,
    size: int | None = None,
    zero_pad: bool | None = None,
) -> bytes:
    """Read up to `size` bytes from the stream's current position.

    A single read is issued. Fewer bytes than requested is a valid result
    (small files); with zero padding enabled the result is filled up to
    exactly `size` bytes.

    Args:
        stream: Open binary stream
        size: Maximum bytes to read (defaults to settings.detection.read_size)
        zero_pad: Pad short reads with zeros (defaults to settings.detection.zero_pad)

    Returns:
        The bytes read

    Raises:
        ValueError: If size is not positive
        ReadFailureError: If the read itself fails
    """
    detection = get_settings().detection
    size = size if size is not None else detection.read_size
    zero_pad = zero_pad if zero_pad is not None else detection.zero_pad
    if size <= 0:
        raise ValueError(f"size must be a positive number of bytes, got {size}")

    try:
        data = stream.read(size) or b""
    except OSError as e:
        path = _stream_name(stream)
        logger.warning("Failed to read stream", path=path, error=str(e))
        raise ReadFailureError(f"Error reading file: {e}", path=path, cause=e) from e

    if zero_pad and len(data) < size:
        data = data + bytes(size - len(data))
    return data


def open_media(path: str | os.PathLike[str]) -> BinaryIO:
    """Open a file for binary reading.

    Raises:
        OpenFailureError: If the path is missing, inaccessible or not a file
    """
    path_str = os.fspath(path)
    try:
        return open(path_str, "rb")
    except OSError as e:
        logger.warning("Failed to open file", path=path_str, error=str(e))
        raise OpenFailureError(f"Error opening file: {e}", path=path_str, cause=e) from e


def classify_file(stream: BinaryIO, size: int | None = None) -> ContainerType:
    """Classify an already opened binary stream.

    Raises:
        ReadFailureError: If reading fails
        NotIdentifiedError: If no signature matched
    """
    data = read_prefix(stream, size)
    return classify_bytes(data, path=_stream_name(stream))


def classify_path(path: str | os.PathLike[str], size: int | None = None) -> ContainerType:
    """Open a file by path and classify it.

    Raises:
        OpenFailureError: If the file cannot be opened
        ReadFailureError: If reading fails
        NotIdentifiedError: If no signature matched
    """
    with open_media(path) as stream:
        return classify_file(stream, size)
