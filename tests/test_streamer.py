"""
Tests for summary chunking, delayed emission and generation strategies
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from event_hub.events import EventService, to_public_event
from event_hub.repository import EventRepository
from event_hub.schema import EventStatus
from event_hub.summary import (
    CacheStatus,
    OpenAISummaryGenerator,
    SummaryCache,
    SummaryStreamer,
    TemplateSummaryGenerator,
    build_summary_generator,
    chunk_summary,
)
from event_hub.settings import Settings
from event_hub.utils import BackgroundTasks

from tests.helpers import SleepRecorder, make_event


def test_chunks_carry_trailing_space_except_last():
    assert chunk_summary("one two three four five six seven", 3) == [
        "one two three ",
        "four five six ",
        "seven",
    ]


def test_chunks_reassemble_to_normalized_text():
    text = "Join  us for\tthe   launch party tonight"

    assert "".join(chunk_summary(text, 2)) == " ".join(text.split())


def test_chunk_edge_cases():
    assert chunk_summary("", 3) == []
    assert chunk_summary("single", 3) == ["single"]
    assert chunk_summary("a b c", 3) == ["a b c"]
    with pytest.raises(ValueError):
        chunk_summary("a b", 0)


async def test_streamer_sleeps_between_chunks_only():
    sleep = SleepRecorder()
    streamer = SummaryStreamer(chunk_size=2, delay_ms=50, sleep=sleep)

    chunks = [chunk async for chunk in streamer.stream("a b c d e")]

    assert chunks == ["a b ", "c d ", "e"]
    assert sleep.calls == [0.05, 0.05]


async def test_template_summary_for_upcoming_event():
    event = to_public_event(make_event("evt-1", 10, location="Austin", title="Launch Party"))

    summary = await TemplateSummaryGenerator().generate(event)

    assert summary.startswith('Join us for "Launch Party" on ')
    assert " in Austin." in summary
    assert "This upcoming event" in summary
    assert summary.endswith("Register now to secure your spot.")


def test_template_summary_for_past_event():
    event = to_public_event(make_event("evt-1", -10, status=EventStatus.CANCELLED))

    summary = TemplateSummaryGenerator.render(event)

    assert "This past event" in summary
    assert summary.endswith("Check out our other upcoming events!")


def test_template_summary_formats_date_and_time():
    event = to_public_event(make_event("evt-1", 10))
    start = event.start_at
    hour = start.hour % 12 or 12
    period = "AM" if start.hour < 12 else "PM"

    summary = TemplateSummaryGenerator.render(event)

    assert f"{start:%A}, {start:%B} {start.day}, {start.year}" in summary
    assert f"at {hour:02d}:{start.minute:02d} {period}" in summary


def test_openai_prompt_mentions_event_details():
    event = to_public_event(make_event("evt-1", 10, location="Oslo", title="Fjord Run"))

    prompt = OpenAISummaryGenerator.build_prompt(event)

    assert "Title: Fjord Run" in prompt
    assert "Location: Oslo" in prompt
    assert "This is an upcoming event." in prompt


def test_build_summary_generator_picks_strategy():
    template = build_summary_generator(Settings(summary_strategy="template"))
    openai = build_summary_generator(Settings(summary_strategy="openai", openai_api_key="sk-test"))

    assert isinstance(template, TemplateSummaryGenerator)
    assert isinstance(openai, OpenAISummaryGenerator)


def test_openai_generator_requires_api_key():
    with pytest.raises(ValueError):
        OpenAISummaryGenerator(api_key="")


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


async def test_openai_generate_calls_chat_completions():
    generator = OpenAISummaryGenerator(api_key="sk-test", model="gpt-test", max_tokens=120)
    create = AsyncMock(return_value=_completion("  A bright evening of talks in Oslo.  "))
    generator._client.chat.completions.create = create
    event = to_public_event(make_event("evt-1", 10, location="Oslo", title="Fjord Run"))

    summary = await generator.generate(event)

    assert summary == "A bright evening of talks in Oslo."
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["max_tokens"] == 120
    assert kwargs["temperature"] == 0.7
    assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]
    assert kwargs["messages"][1]["content"] == OpenAISummaryGenerator.build_prompt(event)


async def test_openai_generate_handles_missing_content():
    generator = OpenAISummaryGenerator(api_key="sk-test")
    generator._client.chat.completions.create = AsyncMock(return_value=_completion(None))

    assert await generator.generate(to_public_event(make_event("evt-1", 10))) == ""


async def test_openai_summary_is_chunked_and_cached_like_template_text():
    generator = OpenAISummaryGenerator(api_key="sk-test")
    generator._client.chat.completions.create = AsyncMock(
        return_value=_completion("Fjord Run returns with scenic trails and live music")
    )
    cache = SummaryCache()
    repository = EventRepository()
    service = EventService(
        repository,
        cache,
        summary_generator=generator,
        summary_streamer=SummaryStreamer(chunk_size=3, sleep=SleepRecorder()),
        background_tasks=BackgroundTasks(),
    )
    event = make_event("evt-1", 10, title="Fjord Run")
    await repository.create(event)

    miss = await service.open_summary_stream(event.id)
    frames = [frame async for frame in miss.frames]
    hit = await service.open_summary_stream(event.id)

    assert miss.cache_status == CacheStatus.MISS
    assert frames == ["Fjord Run returns ", "with scenic trails ", "and live music"]
    assert hit.cache_status == CacheStatus.HIT
    assert [frame async for frame in hit.frames] == ["".join(frames)]
    assert generator._client.chat.completions.create.await_count == 1
