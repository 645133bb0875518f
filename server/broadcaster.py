"""Fan-out of serialized messages to WebSocket subscriber queues."""

import asyncio

__all__ = ["Broadcaster"]


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    """Put ``message`` on ``queue``, dropping the oldest entry when full."""
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Set of subscriber queues owned by one application instance.

    ``publish`` may be called from any thread; the queues are only touched
    on the event loop through ``call_soon_threadsafe``.

    Args:
        loop: Event loop the subscriber queues belong to.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._subscribers: list[asyncio.Queue[str]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def add_subscriber(self, queue: asyncio.Queue[str]) -> None:
        self._subscribers.append(queue)

    def remove_subscriber(self, queue: asyncio.Queue[str]) -> None:
        self._subscribers.remove(queue)

    def publish(self, message: str) -> None:
        """Dispatch a message to all active subscriber queues safely."""
        for queue in list(self._subscribers):
            self._loop.call_soon_threadsafe(_enqueue_message, queue, message)
