"""
@file_name: settings.py
@author: NetMind.AI
@date: 2026-02-09
@description: Unified configuration management

Uses pydantic-settings to centrally manage all environment variables.

Usage:
    from event_hub.settings import settings

    token = settings.admin_token
    delay = settings.summary_chunk_delay_ms
"""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (3 levels up from src/event_hub/settings.py)
_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application global configuration, automatically loaded from .env file and environment variables"""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ===== Server =====
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = [
        "http://localhost:5173",  # Vite dev server
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # ===== Auth =====
    admin_token: str = "dev-admin-token"

    # ===== Logging =====
    log_level: str = "INFO"
    log_json: bool = False

    # ===== Summary =====
    summary_strategy: Literal["template", "openai"] = "template"
    summary_chunk_size: int = 3
    summary_chunk_delay_ms: int = 50

    # ===== OpenAI (only used when summary_strategy == "openai") =====
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: Optional[str] = None


settings = Settings()
