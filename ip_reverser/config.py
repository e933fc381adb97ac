from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration, read from IP_REVERSER_* environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file='.env',
        env_file_encoding='utf-8',
        env_prefix='IP_REVERSER_',
        extra='ignore',
    )

    host: str = Field('0.0.0.0', description='Bind address')
    port: int = Field(8080, ge=1, le=65535, description='Bind port')
    debug: bool = Field(False, description='Run Flask in debug mode')
    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = Field(
        'INFO', description='Minimum log level'
    )
    service_name: str = Field('ip-reverse-app', description='Name reported by /health')


@lru_cache
def get_settings() -> Settings:
    return Settings()
