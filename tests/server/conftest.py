"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from navsentence.nmea.types import ParsedMessage


class ControlledSentenceReader:
    """Stand-in for ``SentenceReader`` fed from a queue by the test."""

    def __init__(self) -> None:
        self.message_queue: queue.Queue[ParsedMessage | None] = queue.Queue()

    def __enter__(self) -> "ControlledSentenceReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[ParsedMessage]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


@pytest.fixture(autouse=True)
def reader_controller() -> Iterator[ControlledSentenceReader]:
    controller = ControlledSentenceReader()
    with patch("server.main.SentenceReader", return_value=controller):
        yield controller
    controller.message_queue.put(None)
