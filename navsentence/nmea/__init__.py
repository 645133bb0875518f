"""NMEA 0183 sentence decoding: handlers, field decoders and the dispatcher."""

from navsentence.nmea.checksum import validate_checksum
from navsentence.nmea.errors import (
    ChecksumError,
    InvalidEnumerationError,
    MalformedFieldError,
    MalformedSentenceError,
    ParseError,
    UnsupportedSentenceError,
)
from navsentence.nmea.parser import NmeaParser
from navsentence.nmea.types import (
    INCOMPLETE,
    FaaMode,
    GgaData,
    Incomplete,
    NavigationSystem,
    ParsedMessage,
    RmcData,
    VtgData,
)

__all__ = [
    "INCOMPLETE",
    "ChecksumError",
    "FaaMode",
    "GgaData",
    "Incomplete",
    "InvalidEnumerationError",
    "MalformedFieldError",
    "MalformedSentenceError",
    "NavigationSystem",
    "NmeaParser",
    "ParseError",
    "ParsedMessage",
    "RmcData",
    "UnsupportedSentenceError",
    "VtgData",
    "validate_checksum",
]
