"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    todo_file: Path = Path("todo.txt")
    done_file: Path = Path("done.txt")
    log_level: str = "WARNING"

    class Config:
        env_prefix = "TODO_"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
