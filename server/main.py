"""FastAPI service for decoding NMEA sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Endpoints:

* ``POST /decode`` decodes one sentence sent as ``{"sentence": "$GPRMC,..."}``
  and returns the record as JSON. A sentence that fails to decode returns
  422 with the failure kind and message.
* ``GET /sentences`` lists the supported sentence types.
* ``ws://<host>:8000/ws`` streams one JSON message per sentence received
  from the NMEA source (gpsd on localhost:2947).
"""

import asyncio
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from navsentence.nmea.errors import ParseError
from navsentence.nmea.parser import NmeaParser
from navsentence.stream import SentenceReader
from server.broadcaster import Broadcaster
from server.formatters import message_to_dict
from server.receiver import run_receiver

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


class DecodeRequest(BaseModel):
    sentence: str


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    broadcaster = Broadcaster(loop)
    reader = SentenceReader()
    application.state.parser = NmeaParser()
    application.state.broadcaster = broadcaster
    executor = ThreadPoolExecutor(max_workers=1)
    loop.run_in_executor(executor, run_receiver, reader, broadcaster)
    yield
    reader.cancel()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.post("/decode")
def decode_sentence(body: DecodeRequest, request: Request) -> dict[str, Any]:
    """Decode a single NMEA sentence.

    Raises:
        HTTPException: 422 with ``{"error": <kind>, "message": <text>}`` when
            the sentence cannot be decoded.
    """
    parser: NmeaParser = request.app.state.parser
    try:
        message = parser.parse_sentence(body.sentence)
    except ParseError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": e.kind, "message": str(e)},
        ) from e
    return message_to_dict(message)


@app.get("/sentences")
def list_sentences(request: Request) -> list[str]:
    parser: NmeaParser = request.app.state.parser
    return parser.supported_sentences


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded NMEA messages to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the receiver thread. The connection closes with code 1001, and
    the client should reconnect, if no message arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    broadcaster: Broadcaster = websocket.app.state.broadcaster
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    # Subscribe before accepting so nothing published after the handshake is missed
    broadcaster.add_subscriber(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.remove_subscriber(queue)
