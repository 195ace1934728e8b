"""
Summary package

- cache: content-addressed SummaryCache
- generators: template / OpenAI summary strategies
- streamer: chunking, delayed emission, SummaryStream
"""

from .cache import SummaryCache, CacheEntry, compute_content_hash
from .generators import (
    SummaryGenerator,
    TemplateSummaryGenerator,
    OpenAISummaryGenerator,
    build_summary_generator,
)
from .streamer import (
    CacheStatus,
    SummaryStream,
    SummaryStreamer,
    chunk_summary,
    single_frame,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DELAY_MS,
)

__all__ = [
    "SummaryCache",
    "CacheEntry",
    "compute_content_hash",
    "SummaryGenerator",
    "TemplateSummaryGenerator",
    "OpenAISummaryGenerator",
    "build_summary_generator",
    "CacheStatus",
    "SummaryStream",
    "SummaryStreamer",
    "chunk_summary",
    "single_frame",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_DELAY_MS",
]
