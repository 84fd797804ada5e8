"""Infer media container formats from their leading bytes."""

from media_infer.core.classifier import (
    DETECTION_ORDER,
    classify_bytes,
    identify,
    matching_formats,
)
from media_infer.core.reader import classify_file, classify_path, open_media, read_prefix
from media_infer.formats import ContainerType
from media_infer.utils.exceptions import (
    AcquisitionError,
    InvalidFormatNameError,
    MediaInferError,
    NotIdentifiedError,
    OpenFailureError,
    ReadFailureError,
)

__all__ = [
    "ContainerType",
    "DETECTION_ORDER",
    "classify_bytes",
    "classify_file",
    "classify_path",
    "identify",
    "matching_formats",
    "open_media",
    "read_prefix",
    "MediaInferError",
    "AcquisitionError",
    "InvalidFormatNameError",
    "NotIdentifiedError",
    "OpenFailureError",
    "ReadFailureError",
]
