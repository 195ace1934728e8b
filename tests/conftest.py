"""
Global pytest configuration and fixtures for Event Hub tests
"""

import pytest
from fastapi.testclient import TestClient

from event_hub.settings import Settings

from backend.main import create_app
from tests.helpers import ADMIN_TOKEN, RecordingNotifier, SleepRecorder


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        admin_token=ADMIN_TOKEN,
        log_level="WARNING",
        summary_strategy="template",
        summary_chunk_size=3,
        summary_chunk_delay_ms=50,
    )


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def app(test_settings, sleep_recorder, notifier):
    return create_app(
        test_settings,
        summary_sleep=sleep_recorder,
        notification_service=notifier,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
