"""
Buffer serializer.

Drains a finalized document into a single ``bytes`` value. A producer task
pumps the document's chunk stream into a bounded queue as data events,
terminated by exactly one end or error event; the consumer concatenates the
data in arrival order. This is the only suspension point of a generation
call.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum

from laundry_invoice.config import get_logger
from laundry_invoice.core.entities.document import DocumentState
from laundry_invoice.core.exceptions import DocumentStateError, DocumentStreamError
from laundry_invoice.core.interfaces.canvas import ICanvas

logger = get_logger(__name__)

DEFAULT_QUEUE_SIZE = 8


class StreamEventKind(str, Enum):
    DATA = "data"
    END = "end"
    ERROR = "error"


@dataclass(frozen=True)
class StreamEvent:
    kind: StreamEventKind
    chunk: bytes = b""
    error: BaseException | None = None


async def _pump(document: ICanvas, channel: "asyncio.Queue[StreamEvent]") -> None:
    """Producer: forward every chunk, then a single end or error event."""
    try:
        for chunk in document.open_stream():
            await channel.put(StreamEvent(StreamEventKind.DATA, chunk=chunk))
    except Exception as e:
        await channel.put(StreamEvent(StreamEventKind.ERROR, error=e))
        return
    await channel.put(StreamEvent(StreamEventKind.END))


async def serialize(document: ICanvas, queue_size: int = DEFAULT_QUEUE_SIZE) -> bytes:
    """
    Collect the finalized document's byte stream.

    Args:
        document: Canvas in the finalized state.
        queue_size: Maximum number of chunks buffered between producer and
            consumer.

    Returns:
        The complete document bytes.

    Raises:
        DocumentStateError: If the document has not been finalized.
        DocumentStreamError: If the stream fails; no partial bytes are returned.
    """
    if document.state is not DocumentState.FINALIZED:
        raise DocumentStateError(
            "serialize", DocumentState.FINALIZED.value, document.state.value
        )

    channel: asyncio.Queue[StreamEvent] = asyncio.Queue(maxsize=queue_size)
    producer = asyncio.create_task(_pump(document, channel))
    chunks: list[bytes] = []

    try:
        while True:
            event = await channel.get()
            if event.kind is StreamEventKind.DATA:
                chunks.append(event.chunk)
            elif event.kind is StreamEventKind.END:
                break
            else:
                logger.error("invoice_stream_failed", error=str(event.error))
                raise DocumentStreamError(str(event.error)) from event.error
    finally:
        if not producer.done():
            producer.cancel()
        await asyncio.gather(producer, return_exceptions=True)

    return b"".join(chunks)
