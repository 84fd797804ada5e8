"""Magic-byte signatures for supported media containers.

Single source of truth for every constant the detectors compare against.
References:
- https://en.wikipedia.org/wiki/List_of_file_signatures
- https://www.garykessler.net/library/file_sigs.html
"""

# Fixed signatures anchored at offset 0
ASF_MAGIC = b"\x30\x26\xb2\x75"
MKV_EBML_MAGIC = b"\x1a\x45\xdf\xa3"
MKV_SEGMENT_MAGIC = b"\x18\x53\x80\x67"
GXF_MAGIC = b"\x00\x00\x00\x00\x01\xbc"
WTV_MAGIC = b"\xb7\xd8\x00\x20"
TIVO_MAGIC = b"TiVo"
ES_MAGIC = b"\x00\x00\x01\xb3"  # MPEG video sequence header

# RCWT: (offset, byte) pairs, bytes 3-7 are unconstrained
RCWT_MAGIC: tuple[tuple[int, int], ...] = (
    (0, 0xCC),
    (1, 0xCC),
    (2, 0xED),
    (8, 0x00),
    (9, 0x00),
    (10, 0x00),
)
RCWT_MIN_LENGTH = 11

# MP4: "ftyp" box type plus major brand, at offset 4 (after the box size)
MP4_OFFSET = 4
MP4_MAGIC: tuple[bytes, ...] = (
    b"ftypMSNV",
    b"ftypisom",
)

# MXF partition pack key, may be preceded by run-in data
MXF_MAGIC = b"\x06\x0e\x2b\x34\x02\x05\x01\x01\x0d\x01\x02\x01\x01\x02"

# Packetized streams: periodic sync bytes instead of a magic number
SYNC_BYTE = 0x47
SYNC_BYTES_TO_CHECK = 8
TS_PACKET_SIZE = 188
M2TS_PACKET_SIZE = 192
M2TS_TIMECODE_SIZE = 4  # TP_extra_header ahead of each TS packet

# PS pack header, searched within the first PS_SCAN_WINDOW bytes
PS_MAGIC = b"\x00\x00\x01\xba"
PS_SCAN_WINDOW = 50000
