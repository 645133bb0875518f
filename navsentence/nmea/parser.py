"""Sentence dispatcher.

``NmeaParser`` is the entry point for decoding one NMEA sentence. It checks
the framing and checksum, works out the navigation system from the talker id
and hands the sentence to the handler registered for its type:

    "$GNRMC,..."  ->  talker "GN" (Combined)  +  type "RMC"  ->  rmc.handle

Each parser owns its handler table. The table is fixed when the parser is
constructed and only read afterwards, so one parser can be shared between
threads and several parsers with different tables can coexist.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from navsentence.nmea import gga, rmc, vtg
from navsentence.nmea.checksum import has_checksum, validate_checksum
from navsentence.nmea.errors import (
    ChecksumError,
    MalformedSentenceError,
    ParseError,
    UnsupportedSentenceError,
)
from navsentence.nmea.fields import split_fields
from navsentence.nmea.types import NavigationSystem, ParsedMessage

__all__ = ["DEFAULT_HANDLERS", "NmeaParser", "SentenceHandler"]

logger = logging.getLogger(__name__)

SentenceHandler = Callable[[str, NavigationSystem], ParsedMessage]

DEFAULT_HANDLERS: Mapping[str, SentenceHandler] = MappingProxyType(
    {
        "GGA": gga.handle,
        "RMC": rmc.handle,
        "VTG": vtg.handle,
    }
)

# 2 talker characters + 3 sentence type characters
_MINIMUM_MESSAGE_TYPE_LENGTH = 5


class NmeaParser:
    """Decode NMEA 0183 sentences into typed records.

    Usage::

        parser = NmeaParser()
        message = parser.parse_sentence(
            "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191120,020.3,E*67"
        )
        if isinstance(message, RmcData):
            print(message.latitude, message.longitude)

    Args:
        require_checksum: Reject sentences without a '*hh' checksum. A
            checksum that is present is always validated.
        handlers: Sentence type -> handler table. Defaults to the built-in
            GGA, RMC and VTG handlers.
    """

    def __init__(
        self,
        require_checksum: bool = True,
        handlers: Mapping[str, SentenceHandler] | None = None,
    ) -> None:
        self._require_checksum = require_checksum
        self._handlers: Mapping[str, SentenceHandler] = MappingProxyType(
            dict(DEFAULT_HANDLERS if handlers is None else handlers)
        )

    @property
    def handlers(self) -> Mapping[str, SentenceHandler]:
        """Read-only view of the handler table."""
        return self._handlers

    @property
    def supported_sentences(self) -> list[str]:
        return sorted(self._handlers)

    def _check_framing(self, sentence: str) -> None:
        if not sentence.startswith("$"):
            raise MalformedSentenceError(
                f"Sentence does not start with '$': {sentence[:16]!r}"
            )
        if has_checksum(sentence):
            if not validate_checksum(sentence):
                raise ChecksumError(f"Checksum mismatch: {sentence!r}")
        elif self._require_checksum:
            raise ChecksumError(f"Checksum missing: {sentence!r}")

    def _split_message_type(self, sentence: str) -> tuple[str, str]:
        message_type = split_fields(sentence)[0]
        if len(message_type) < _MINIMUM_MESSAGE_TYPE_LENGTH:
            raise MalformedSentenceError(
                f"Message type too short: {message_type!r}"
            )
        return message_type[:2], message_type[2:]

    def parse_sentence(self, sentence: str) -> ParsedMessage:
        """Decode one sentence.

        Args:
            sentence: Raw NMEA sentence. Surrounding whitespace and line
                endings are stripped.

        Returns:
            A record (``RmcData``, ``GgaData``, ``VtgData``) or
            ``INCOMPLETE`` when a multi-part sentence awaits more input.

        Raises:
            MalformedSentenceError: If the text is not an NMEA sentence
            ChecksumError: If the checksum is wrong, or missing while
                ``require_checksum`` is set
            UnsupportedSentenceError: If no handler is registered for the
                sentence type
            MalformedFieldError: If a field holds an unparsable number
            InvalidEnumerationError: If a field holds an unknown letter code
        """
        sentence = sentence.strip()
        try:
            self._check_framing(sentence)
            talker_id, sentence_kind = self._split_message_type(sentence)

            handler = self._handlers.get(sentence_kind)
            if handler is None:
                raise UnsupportedSentenceError(
                    f"Unsupported sentence type: {sentence_kind}",
                    sentence_kind=sentence_kind,
                )

            return handler(sentence, NavigationSystem.from_talker_id(talker_id))
        except ParseError as e:
            logger.debug("Parse error (%s) for %r: %s", e.kind, sentence, e)
            raise
