"""NMEA decode failures.

Every failure raised while decoding a sentence derives from ``ParseError``.
The subclasses let callers branch on what went wrong without matching the
message text:

    MalformedFieldError      a present numeral could not be parsed
    InvalidEnumerationError  a present letter is outside its alphabet
    MalformedSentenceError   the line is not an NMEA sentence at all
    ChecksumError            the checksum is missing or does not match
    UnsupportedSentenceError no handler is registered for the sentence type

An empty field is never an error; decoders return None for it.
"""

from typing import ClassVar

__all__ = [
    "ChecksumError",
    "InvalidEnumerationError",
    "MalformedFieldError",
    "MalformedSentenceError",
    "ParseError",
    "UnsupportedSentenceError",
]


class ParseError(ValueError):
    """Base class for all sentence decoding failures.

    Attributes:
        kind: Stable machine-readable failure category.
        sentence_kind: Three-letter sentence type (e.g. "RMC"), or None when
            the failure happened before the type was known.
    """

    kind: ClassVar[str] = "parse_error"

    def __init__(self, message: str, sentence_kind: str | None = None) -> None:
        super().__init__(message)
        self.sentence_kind = sentence_kind


class MalformedFieldError(ParseError):
    """A non-empty numeric field does not parse as the expected number."""

    kind: ClassVar[str] = "malformed_field"

    def __init__(
        self,
        message: str,
        sentence_kind: str | None = None,
        field_index: int | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message, sentence_kind)
        self.field_index = field_index
        self.value = value


class InvalidEnumerationError(ParseError):
    """A non-empty letter field holds a code outside its recognized alphabet."""

    kind: ClassVar[str] = "invalid_enumeration"

    def __init__(
        self,
        message: str,
        sentence_kind: str | None = None,
        field_index: int | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message, sentence_kind)
        self.field_index = field_index
        self.value = value


class MalformedSentenceError(ParseError):
    kind: ClassVar[str] = "malformed_sentence"


class ChecksumError(ParseError):
    kind: ClassVar[str] = "checksum"


class UnsupportedSentenceError(ParseError):
    kind: ClassVar[str] = "unsupported_sentence"
