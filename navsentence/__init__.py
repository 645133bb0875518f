"""Navsentence package for decoding NMEA 0183 navigation sentences."""

from navsentence.nmea import (
    INCOMPLETE,
    ChecksumError,
    FaaMode,
    GgaData,
    Incomplete,
    InvalidEnumerationError,
    MalformedFieldError,
    MalformedSentenceError,
    NavigationSystem,
    NmeaParser,
    ParseError,
    ParsedMessage,
    RmcData,
    UnsupportedSentenceError,
    VtgData,
    validate_checksum,
)
from navsentence.stream import SentenceReader

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
    "SentenceReader",
    "UnsupportedSentenceError",
    "VtgData",
    "validate_checksum",
]
