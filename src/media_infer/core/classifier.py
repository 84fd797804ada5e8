"""Container classification from a byte buffer."""

from collections.abc import Callable

from media_infer.core.detectors import (
    Buffer,
    check_asf,
    check_es,
    check_gxf,
    check_m2ts,
    check_mkv,
    check_mp4,
    check_mxf,
    check_ps,
    check_rcwt,
    check_tivo_ps,
    check_ts,
    check_wtv,
)
from media_infer.formats import ContainerType
from media_infer.utils.exceptions import NotIdentifiedError

# Checks run in this order and the first match wins. Scanning checks
# (MXF, TS, M2TS, PS) must stay behind every offset-0 signature except TiVo/ES.
DETECTION_ORDER: tuple[tuple[ContainerType, Callable[[Buffer], bool]], ...] = (
    (ContainerType.ASF, check_asf),
    (ContainerType.MKV, check_mkv),
    (ContainerType.GXF, check_gxf),
    (ContainerType.WTV, check_wtv),
    (ContainerType.RCWT, check_rcwt),
    (ContainerType.MP4, check_mp4),
    (ContainerType.MXF, check_mxf),
    (ContainerType.TS, check_ts),
    (ContainerType.M2TS, check_m2ts),
    (ContainerType.PS, check_ps),
    (ContainerType.TIVO_PS, check_tivo_ps),
    (ContainerType.ES, check_es),
)


def _as_buffer(buffer: bytes | bytearray | memoryview) -> Buffer:
    if isinstance(buffer, memoryview):
        return buffer.tobytes()
    return buffer


def identify(buffer: bytes | bytearray | memoryview) -> ContainerType | None:
    """Identify the container of a byte buffer.

    Args:
        buffer: Leading bytes of a media file

    Returns:
        The first container in DETECTION_ORDER whose check matches, or None
    """
    data = _as_buffer(buffer)
    for container, check in DETECTION_ORDER:
        if check(data):
            return container
    return None


def classify_bytes(
    buffer: bytes | bytearray | memoryview,
    path: str | None = None,
) -> ContainerType:
    """Classify a byte buffer, raising when nothing matches.

    Args:
        buffer: Leading bytes of a media file
        path: Source path, only used for error context

    Returns:
        Identified container type

    Raises:
        NotIdentifiedError: If no signature matched
    """
    data = _as_buffer(buffer)
    container = identify(data)
    if container is None:
        raise NotIdentifiedError(len(data), path=path)
    return container


def matching_formats(buffer: bytes | bytearray | memoryview) -> list[ContainerType]:
    """Run every check and return all matches in precedence order."""
    data = _as_buffer(buffer)
    return [container for container, check in DETECTION_ORDER if check(data)]
