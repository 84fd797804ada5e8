"""Per-container signature checks.

Each check takes a byte buffer and returns True when that container's
signature is present. Checks never raise: a buffer shorter than the
signature needs is simply not a match.
"""

from media_infer.core.signatures import (
    ASF_MAGIC,
    ES_MAGIC,
    GXF_MAGIC,
    M2TS_PACKET_SIZE,
    M2TS_TIMECODE_SIZE,
    MKV_EBML_MAGIC,
    MKV_SEGMENT_MAGIC,
    MP4_MAGIC,
    MP4_OFFSET,
    MXF_MAGIC,
    PS_MAGIC,
    PS_SCAN_WINDOW,
    RCWT_MAGIC,
    RCWT_MIN_LENGTH,
    SYNC_BYTE,
    SYNC_BYTES_TO_CHECK,
    TIVO_MAGIC,
    TS_PACKET_SIZE,
    WTV_MAGIC,
)

Buffer = bytes | bytearray

_SYNC_RUN = bytes([SYNC_BYTE]) * SYNC_BYTES_TO_CHECK


def _starts_with(buffer: Buffer, magic: bytes) -> bool:
    return len(buffer) >= len(magic) and buffer[: len(magic)] == magic


def _has_sync_run(buffer: Buffer, packet_size: int, lead: int = 0) -> bool:
    """Look for SYNC_BYTES_TO_CHECK sync bytes spaced packet_size apart.

    Every phase in [0, packet_size) is tried. The buffer must be strictly
    longer than packet_size * SYNC_BYTES_TO_CHECK + lead, so a run that ends
    on the very last byte is not enough.
    """
    span = packet_size * SYNC_BYTES_TO_CHECK
    if len(buffer) <= span + lead:
        return False

    for phase in range(lead, lead + packet_size):
        if buffer[phase : phase + span : packet_size] == _SYNC_RUN:
            return True
    return False


def check_asf(buffer: Buffer) -> bool:
    """Advanced Systems Format header object GUID (first 4 bytes)."""
    return _starts_with(buffer, ASF_MAGIC)


def check_mkv(buffer: Buffer) -> bool:
    """Matroska, either the EBML header or a bare Segment element."""
    return _starts_with(buffer, MKV_EBML_MAGIC) or _starts_with(buffer, MKV_SEGMENT_MAGIC)


def check_gxf(buffer: Buffer) -> bool:
    """General eXchange Format packet leader."""
    return _starts_with(buffer, GXF_MAGIC)


def check_wtv(buffer: Buffer) -> bool:
    """Windows Recorded TV Show."""
    return _starts_with(buffer, WTV_MAGIC)


def check_rcwt(buffer: Buffer) -> bool:
    """CCExtractor raw captions with time.

    Only the fixed bytes of the header are compared, the version and
    reserved bytes in between may hold anything.
    """
    if len(buffer) < RCWT_MIN_LENGTH:
        return False
    return all(buffer[offset] == value for offset, value in RCWT_MAGIC)


def check_mp4(buffer: Buffer) -> bool:
    """ISO base media file with an MSNV or isom major brand."""
    end = MP4_OFFSET + len(MP4_MAGIC[0])
    if len(buffer) < end:
        return False
    return buffer[MP4_OFFSET:end] in MP4_MAGIC


def check_mxf(buffer: Buffer) -> bool:
    """Material Exchange Format partition pack key, at any offset."""
    if len(buffer) < len(MXF_MAGIC):
        return False
    return buffer.find(MXF_MAGIC) != -1


def check_ts(buffer: Buffer) -> bool:
    """MPEG transport stream: 8 sync bytes at a 188-byte stride."""
    return _has_sync_run(buffer, TS_PACKET_SIZE)


def check_m2ts(buffer: Buffer) -> bool:
    """BDAV MPEG-2 transport stream.

    Same as TS but each packet carries a 4-byte timecode prefix, so the
    stride is 192 and the sync byte sits 4 bytes into each packet.
    """
    return _has_sync_run(buffer, M2TS_PACKET_SIZE, lead=M2TS_TIMECODE_SIZE)


def check_ps(buffer: Buffer) -> bool:
    """Program stream pack header within the first PS_SCAN_WINDOW bytes."""
    if len(buffer) < len(PS_MAGIC):
        return False
    window = min(len(buffer), PS_SCAN_WINDOW)
    return buffer.find(PS_MAGIC, 0, window) != -1


def check_tivo_ps(buffer: Buffer) -> bool:
    """TiVo program stream."""
    return _starts_with(buffer, TIVO_MAGIC)


def check_es(buffer: Buffer) -> bool:
    """MPEG elementary video stream starting with a sequence header."""
    return _starts_with(buffer, ES_MAGIC)
