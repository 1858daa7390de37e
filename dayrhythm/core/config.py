"""
Settings for the DayRhythm backend.

Values come from the process environment, with a `.env` file at the
repository root loaded first (existing variables win). Supabase and
LLM keys are only ever read from the environment.

Usage:
    >>> from dayrhythm.core.config import get_settings
    >>> get_settings().groq_model
    'llama-3.3-70b-versatile'
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE)

# Value shipped in the sample .env; treated the same as "not set"
GEMINI_PLACEHOLDER_KEY = "your_gemini_api_key_here"


@dataclass(frozen=True)
class Settings:
    """
    Immutable runtime configuration.

    Attributes:
        app_name: Name used in logs and the OpenAPI title
        app_env: NODE_ENV (development, production, test, ...)
        log_level: Console log level name
        port: HTTP port for uvicorn
        cors_origin: Allowed origin(s), comma separated, or "*"
        supabase_url: Supabase project URL
        supabase_anon_key: Supabase public (anon) key
        supabase_service_key: Service-role key used for the store and token checks
        groq_api_key: Groq API key
        gemini_api_key: Google Gemini key; pro and vision parsing need it
        groq_model: Groq model for insights, task tips and text parsing
        gemini_text_model: Gemini model for /parse-schedule-pro
        gemini_vision_model: Gemini model for timetable images
    """
    app_name: str
    app_env: str
    log_level: str
    port: int
    cors_origin: str

    supabase_url: str
    supabase_anon_key: str
    supabase_service_key: str

    groq_api_key: str
    gemini_api_key: Optional[str]
    groq_model: str
    gemini_text_model: str
    gemini_vision_model: str

    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @property
    def gemini_configured(self) -> bool:
        """True when a real Gemini key is available."""
        return bool(self.gemini_api_key) and self.gemini_api_key != GEMINI_PLACEHOLDER_KEY

    @property
    def cors_origins(self) -> List[str]:
        """CORS_ORIGIN split into a list for CORSMiddleware."""
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Read `key`, falling back to `default`. Empty strings count as unset.

    Raises:
        ValueError: `key` is unset and has no default
    """
    value = os.environ.get(key) or default
    if value is None:
        raise ValueError(f"Missing required environment variable {key}; add it to .env")
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Build Settings once per process.

    Call get_settings.cache_clear() after changing the environment.

    Raises:
        ValueError: A required variable is missing
    """
    return Settings(
        app_name=_get_env("APP_NAME", "DayRhythm AI Backend"),
        app_env=_get_env("NODE_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        port=int(_get_env("PORT", "3000")),
        cors_origin=_get_env("CORS_ORIGIN", "*"),

        supabase_url=_get_env("SUPABASE_URL"),
        supabase_anon_key=_get_env("SUPABASE_ANON_KEY"),
        supabase_service_key=_get_env("SUPABASE_SERVICE_KEY"),

        groq_api_key=_get_env("GROQ_API_KEY"),
        gemini_api_key=os.environ.get("GEMINI_API_KEY") or None,
        groq_model=_get_env("GROQ_MODEL", "llama-3.3-70b-versatile"),
        gemini_text_model=_get_env("GEMINI_TEXT_MODEL", "gemini-2.5-flash"),
        gemini_vision_model=_get_env("GEMINI_VISION_MODEL", "gemini-2.0-flash-exp"),
    )
