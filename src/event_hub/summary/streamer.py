"""
@file_name: streamer.py
@author: NetMind.AI
@date: 2026-01-04
@description: Chunked summary delivery

Simulates token-by-token generation: the summary is split into groups of words
and emitted one group at a time with a fixed pause in between. The pause is an
injectable coroutine function so tests never depend on wall-clock time.

Reassembly contract: "".join(chunk_summary(text)) == " ".join(text.split())
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, Awaitable, Callable, List

DEFAULT_CHUNK_SIZE = 3
DEFAULT_DELAY_MS = 50

SleepFunc = Callable[[float], Awaitable[None]]


class CacheStatus(str, Enum):
    """Value of the X-Summary-Cache response header"""
    HIT = "HIT"
    MISS = "MISS"


def chunk_summary(summary: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[str]:
    """
    Split a summary into word groups

    Every chunk but the last carries one trailing space, so concatenating the
    chunks in order restores natural spacing.

    Args:
        summary: Full summary text
        chunk_size: Words per chunk (>= 1)

    Returns:
        Ordered list of chunks (empty for blank text)
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    words = summary.split()
    chunks = []
    for start in range(0, len(words), chunk_size):
        chunk = " ".join(words[start:start + chunk_size])
        is_last = start + chunk_size >= len(words)
        chunks.append(chunk if is_last else chunk + " ")
    return chunks


class SummaryStreamer:
    """
    Emits chunks with an inter-chunk delay

    Usage:
        streamer = SummaryStreamer(chunk_size=3, delay_ms=50)
        async for chunk in streamer.stream(text):
            ...

        # In tests
        streamer = SummaryStreamer(sleep=AsyncMock())
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        delay_ms: int = DEFAULT_DELAY_MS,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self.chunk_size = chunk_size
        self.delay_ms = delay_ms
        self._sleep = sleep

    async def delay(self) -> None:
        await self._sleep(self.delay_ms / 1000)

    async def stream(self, summary: str) -> AsyncIterator[str]:
        for index, chunk in enumerate(chunk_summary(summary, self.chunk_size)):
            if index:
                await self.delay()
            yield chunk


async def single_frame(text: str) -> AsyncIterator[str]:
    """A cached summary is delivered as one frame with no delay"""
    yield text


@dataclass
class SummaryStream:
    """
    Result of opening a summary stream

    frames must be consumed in order; on MISS the cache is only written once the
    last frame has been consumed.
    """
    event_id: str
    cache_status: CacheStatus
    frames: AsyncIterator[str]
