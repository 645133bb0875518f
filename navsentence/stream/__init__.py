"""Stream module for reading NMEA 0183 sentences from a TCP source."""

from navsentence.stream.reader import SentenceReader

__all__ = ["SentenceReader"]
