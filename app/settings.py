import os
from pydantic import BaseModel, Field
from functools import lru_cache
from typing import List, Optional
from dotenv import load_dotenv
load_dotenv()

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def _env(name: str, default=None, cast=str):
    def _read():
        value = os.getenv(name)
        return cast(value) if value else default
    return Field(default_factory=_read)


class Settings(BaseModel):
    """Process configuration, read from the environment when constructed."""

    APP_NAME: str = _env("APP_NAME", "Resume ATS Analyzer")
    ENV: str = _env("ENV", "development")
    LOG_LEVEL: str = _env("LOG_LEVEL", "INFO")
    HOST: str = _env("HOST", "0.0.0.0")
    PORT: int = _env("PORT", 3000, int)
    CORS_ORIGINS: str = _env("CORS_ORIGINS", "*")
    MAX_UPLOAD_BYTES: int = _env("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES, int)
    GEMINI_API_KEY: Optional[str] = _env("GEMINI_API_KEY")
    GEMINI_MODEL: str = _env("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_API_BASE: str = _env(
        "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
    LLM_TIMEOUT_SECONDS: Optional[float] = _env("LLM_TIMEOUT_SECONDS", None, float)

    model_config = {"frozen": True}

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
