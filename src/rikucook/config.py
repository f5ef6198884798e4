import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_API_VERSION = "2023-06-01"


class CompletionSettings(BaseModel):
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    api_key: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    timeout: Optional[float] = None  # None waits as long as the API takes


def load_settings() -> CompletionSettings:
    """Read completion settings from the environment (and a .env file if present)."""
    load_dotenv()
    return CompletionSettings(
        api_url=os.getenv("RIKUCOOK_API_URL", DEFAULT_API_URL),
        model=os.getenv("RIKUCOOK_MODEL", DEFAULT_MODEL),
        max_tokens=os.getenv("RIKUCOOK_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        api_version=os.getenv("RIKUCOOK_API_VERSION", DEFAULT_API_VERSION),
        timeout=os.getenv("RIKUCOOK_TIMEOUT") or None,
    )


def configure_logging(level: Optional[str] = None) -> None:
    load_dotenv()
    level = (level or os.getenv("RIKUCOOK_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
