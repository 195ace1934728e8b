"""
@file_name: generators.py
@author: NetMind.AI
@date: 2026-01-04
@description: Summary text generation strategies

Two interchangeable strategies produce the full summary text for a PublicEvent:
- TemplateSummaryGenerator: deterministic, no external calls (default)
- OpenAISummaryGenerator: chat completion via the OpenAI async client

The streaming pipeline only sees the returned string, so it behaves the same
whichever strategy is configured.
"""

from __future__ import annotations

from typing import Optional, Protocol

from loguru import logger
from openai import AsyncOpenAI

from event_hub.schema.event_schema import PublicEvent
from event_hub.settings import Settings
from event_hub.utils.timezone import format_date_for_display, format_time_for_display


class SummaryGenerator(Protocol):
    """Anything that turns a PublicEvent into summary text"""

    async def generate(self, event: PublicEvent) -> str:
        ...


class TemplateSummaryGenerator:
    """Deterministic summary built from the event fields"""

    async def generate(self, event: PublicEvent) -> str:
        return self.render(event)

    @staticmethod
    def render(event: PublicEvent) -> str:
        date = format_date_for_display(event.start_at)
        time = format_time_for_display(event.start_at)
        framing = "upcoming" if event.is_upcoming else "past"
        call_to_action = (
            "Register now to secure your spot."
            if event.is_upcoming
            else "Check out our other upcoming events!"
        )

        return (
            f'Join us for "{event.title}" on {date} at {time} in {event.location}. '
            f"This {framing} event promises an unforgettable experience. "
            f"Don't miss out on this opportunity to be part of something special! "
            f"{call_to_action}"
        )


# =============================================================================
# OpenAI strategy
# =============================================================================

SYSTEM_PROMPT = "You are a helpful assistant that creates engaging event summaries."

USER_PROMPT_TEMPLATE = """Generate a short, engaging summary (50-100 words) for an event:
Title: {title}
Date: {date}
Time: {time}
Location: {location}
Status: {status}
{framing}

The summary should be engaging, mention key details, and include a call to action. Keep it concise and exciting."""


class OpenAISummaryGenerator:
    """
    Summary generated by an OpenAI chat model

    Usage:
        generator = OpenAISummaryGenerator(api_key="sk-...", model="gpt-3.5-turbo")
        text = await generator.generate(public_event)
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: Optional[str] = None,
        max_tokens: int = 150,
        temperature: float = 0.7,
    ):
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required for the openai summary strategy")

        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    @staticmethod
    def build_prompt(event: PublicEvent) -> str:
        return USER_PROMPT_TEMPLATE.format(
            title=event.title,
            date=format_date_for_display(event.start_at),
            time=format_time_for_display(event.start_at),
            location=event.location,
            status=event.status.value,
            framing="This is an upcoming event." if event.is_upcoming else "This is a past event.",
        )

    async def generate(self, event: PublicEvent) -> str:
        logger.debug(f"Requesting OpenAI summary for {event.id} (model={self._model})")
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.build_prompt(event)},
            ],
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        content = response.choices[0].message.content if response.choices else None
        return (content or "").strip()


def build_summary_generator(settings: Settings) -> SummaryGenerator:
    """Pick the strategy named by settings.summary_strategy"""
    if settings.summary_strategy == "openai":
        logger.info(f"Using OpenAI summary generator (model={settings.openai_model})")
        return OpenAISummaryGenerator(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
        )
    return TemplateSummaryGenerator()
