import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field


_ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")
load_dotenv(dotenv_path=_ENV_PATH, override=False)


def _get_env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _get_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return int(v)


def _get_list(name: str, default: str) -> List[str]:
    return [x.strip() for x in _get_env(name, default).split(",") if x.strip()]


class Settings(BaseModel):
    APP_ENV: str
    DEBUG: bool
    LOG_LEVEL: str
    DEFAULT_AGE: int = Field(ge=0, le=120)
    CORS_ORIGINS: List[str]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        APP_ENV=_get_env("APP_ENV", "development"),
        DEBUG=_get_bool("DEBUG", True),
        LOG_LEVEL=_get_env("LOG_LEVEL", "INFO").upper(),
        DEFAULT_AGE=_get_int("DEFAULT_AGE", 30),
        CORS_ORIGINS=_get_list("CORS_ORIGINS", "*"),
    )


settings = get_settings()
