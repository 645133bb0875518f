"""SentenceReader: decoded NMEA messages from a TCP line stream.

Connects to a source of newline-delimited NMEA sentences over TCP. By default
this is a local gpsd instance (localhost:2947) switched to raw NMEA relay with
a WATCH command, which lets the reader coexist with everything else gpsd
feeds. Any plain NMEA-over-TCP server works too with ``watch=False``.

Reading strategy:
    Every line starting with '$' is handed to an ``NmeaParser``. Other lines
    (gpsd's own JSON replies such as VERSION and WATCH) are ignored. A
    sentence that fails to decode is logged and skipped; the next one is
    independent of it, so there is nothing to retry.
"""

import contextlib
import logging
import socket
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

from navsentence.nmea.errors import ParseError
from navsentence.nmea.parser import NmeaParser
from navsentence.nmea.types import Incomplete, ParsedMessage

__all__ = ["SentenceReader"]

logger = logging.getLogger(__name__)

# --- connection defaults ------------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # connect and read timeout; bounds cancel() latency

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'


# --- public API ---------------------------------------------------------------


class SentenceReader:
    """Decoded NMEA records from a TCP line source.

    Open it with ``with`` and either iterate, which suits a long-running
    receiver thread::

        with SentenceReader() as reader:
            for message in reader:
                process(message)

    or pull one record at a time::

        with SentenceReader(host="192.168.1.20", port=10110, watch=False) as reader:
            first = reader.read()

    Only fully decoded records come out. Rejected sentences are logged,
    counted in ``skipped`` and passed over.

    Args:
        host: Source host (default: ``"localhost"``).
        port: Source TCP port (default: ``2947``, gpsd).
        parser: Parser used for each sentence (default: a new ``NmeaParser``).
        watch: Send gpsd's NMEA WATCH command after connecting.
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
        parser: NmeaParser | None = None,
        watch: bool = True,
    ) -> None:
        self._address = (host, port)
        self._parser = parser if parser is not None else NmeaParser()
        self._watch = watch
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled = False
        # Sentences dropped because they failed to decode, since __enter__
        self.skipped = 0

    def __enter__(self) -> "SentenceReader":
        sock = socket.create_connection(self._address, timeout=_TIMEOUT)
        if self._watch:
            sock.sendall(_WATCH_CMD)
        self._sock = sock
        self._stream = sock.makefile("rb")
        self.skipped = 0
        logger.info("Connected to NMEA source %s:%d", *self._address)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        for resource in (self._stream, self._sock):
            if resource is not None:
                resource.close()
        self._stream = None
        self._sock = None

    def cancel(self) -> None:
        """Make the current and every later ``read()`` raise ``EOFError``.

        Safe to call from another thread, including before or during
        ``__enter__``: a cancelled reader stays cancelled. Shutting the socket
        down wakes a blocked ``readline()`` at once instead of after the read
        timeout.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _next_line(self, stream: IO[Any]) -> str | None:
        """Return the next line as text, or None when the read timed out.

        Raises:
            EOFError: On cancellation, end of stream or a dropped connection.
        """
        if self._cancelled:
            raise EOFError("NMEA read cancelled.")
        try:
            raw: bytes = stream.readline()
        except TimeoutError:
            if self._cancelled:
                raise EOFError("NMEA read cancelled.") from None
            return None
        except OSError as e:
            raise EOFError("NMEA connection closed.") from e
        if not raw:
            raise EOFError("NMEA stream ended.")
        # NMEA is 7-bit ASCII; line noise is dropped rather than rejected
        return raw.decode("ascii", errors="ignore").strip()

    def _decode(self, line: str) -> ParsedMessage | None:
        if not line.startswith("$"):
            return None
        try:
            message = self._parser.parse_sentence(line)
        except ParseError as e:
            self.skipped += 1
            logger.warning("Skipping sentence %r: %s", line, e)
            return None
        if isinstance(message, Incomplete):
            return None
        return message

    def read(self) -> ParsedMessage:
        """Return the next record, waiting for one as long as necessary.

        Raises:
            RuntimeError: When the reader is not open (outside ``with``).
            EOFError: When the reader is cancelled or the source goes away.
        """
        stream = self._stream
        if stream is None:
            raise RuntimeError("SentenceReader must be used as a context manager.")
        while True:
            line = self._next_line(stream)
            if line is None:
                continue
            message = self._decode(line)
            if message is not None:
                return message

    def __iter__(self) -> Iterator[ParsedMessage]:
        """Yield records until the source ends or ``cancel()`` is called."""
        while True:
            try:
                yield self.read()
            except EOFError:
                return
