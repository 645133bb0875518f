"""Background NMEA receiving loop."""

import logging

from navsentence.stream import SentenceReader
from server.broadcaster import Broadcaster
from server.formatters import format_message

__all__ = ["run_receiver", "run_sentence_loop"]

logger = logging.getLogger(__name__)


def run_sentence_loop(reader: SentenceReader, broadcaster: Broadcaster) -> int:
    """Broadcast every message ``reader`` yields until it ends.

    The caller owns *reader* and must use it as an open context manager. The
    loop exits when ``reader.cancel()`` is called or the stream ends.

    Args:
        reader: An open ``SentenceReader`` instance managed by the caller.
        broadcaster: Destination for the serialized messages.

    Returns:
        Number of messages broadcast.
    """
    count = 0
    for message in reader:
        broadcaster.publish(format_message(message))
        count += 1
    return count


def run_receiver(reader: SentenceReader, broadcaster: Broadcaster) -> None:
    """Open *reader*, run the sentence loop and close it again.

    Connection failures are logged and end the receiver; the HTTP side of the
    service keeps working without a live source.
    """
    try:
        with reader:
            count = run_sentence_loop(reader, broadcaster)
    except OSError as e:
        logger.error("NMEA source unavailable: %s", e)
        return
    logger.info("NMEA stream finished after %d messages", count)
