"""Container type enumeration, name parsing and display labels."""

import enum

from media_infer.utils.exceptions import InvalidFormatNameError


class ContainerType(str, enum.Enum):
    """Media container types.

    There is no "unknown" member: detection failure is reported with
    NotIdentifiedError (or None from identify()), never as a value of this type.
    """

    MKV = "mkv"  # Matroska
    ASF = "asf"  # Advanced Systems Format
    GXF = "gxf"  # General eXchange Format
    WTV = "wtv"  # Windows Recorded TV Show
    RCWT = "rcwt"  # CCExtractor raw captions with time
    MP4 = "mp4"  # MPEG-4
    TS = "ts"  # MPEG transport stream
    PS = "ps"  # Program stream
    MXF = "mxf"  # Material Exchange Format
    M2TS = "m2ts"  # MPEG-2 transport stream (BDAV)
    TIVO_PS = "tivops"  # TiVo program stream
    MCPOODLES_RAW = "raw"  # Never detected from bytes
    ES = "es"  # Elementary stream

    @property
    def display_name(self) -> str:
        """Human-readable label."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "ContainerType":
        """Parse a format token such as "mkv" or "bin".

        Args:
            name: Format token (case-insensitive, surrounding whitespace ignored)

        Returns:
            Matching container type

        Raises:
            InvalidFormatNameError: If the token is not recognized
        """
        container = _NAME_ALIASES.get(name.strip().lower())
        if container is None:
            raise InvalidFormatNameError(name, cls.names())
        return container

    @classmethod
    def names(cls) -> list[str]:
        """List accepted format tokens."""
        return list(_NAME_ALIASES.keys())

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: dict[ContainerType, str] = {
    ContainerType.MKV: "Matroska (MKV)",
    ContainerType.ASF: "Advanced Systems Format (ASF)",
    ContainerType.GXF: "General Exchange Format (GXF)",
    ContainerType.WTV: "Windows Recorded TV Show (WTV)",
    ContainerType.RCWT: "Raw Captions With Time (RCWT)",
    ContainerType.MP4: "MPEG-4 Part 14 (MP4)",
    ContainerType.TS: "MPEG Transport Stream (TS)",
    ContainerType.M2TS: "MPEG-2 Transport Stream (M2TS)",
    ContainerType.PS: "Program Stream (PS)",
    ContainerType.TIVO_PS: "Tivo Program Stream (Tivo PS)",
    ContainerType.MXF: "Material Exchange Format (MXF)",
    ContainerType.MCPOODLES_RAW: "McPoodle's Raw File",
    ContainerType.ES: "Elementary Stream (ES)",
}

# Every member's own value is a token; "bin" is the extra RCWT synonym
_NAME_ALIASES: dict[str, ContainerType] = {member.value: member for member in ContainerType}
_NAME_ALIASES["bin"] = ContainerType.RCWT
