import os
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from .constants import ROOT_POSITION


class Settings(BaseSettings):
    database_url: Optional[str] = Field(None, alias="REPERTOIRE_DATABASE_URL")
    database_pool_size: int = Field(10, alias="REPERTOIRE_DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(10, alias="REPERTOIRE_DATABASE_MAX_OVERFLOW")
    database_echo: bool = Field(False, alias="REPERTOIRE_DATABASE_ECHO")
    line_extension_policy: Literal["random", "prefer_due"] = Field(
        "random",
        alias="REPERTOIRE_LINE_EXTENSION_POLICY",
    )
    root_position: str = Field(ROOT_POSITION, alias="REPERTOIRE_ROOT_POSITION")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[arg-type]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid backend configuration: {exc}") from exc
