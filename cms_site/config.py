from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator, model_validator
from functools import lru_cache
from typing import Annotated
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Payload CMS content API
    PAYLOAD_URL: str = "http://localhost:3000"
    PAYLOAD_TIMEOUT: float = 30.0  # Seconds per request, no retries
    PAGE_DEPTH: int = 2  # Resolve blocks and their media
    POST_DEPTH: int = 1  # Resolve category and hero image
    NAVIGATION_DEPTH: int = 1  # Resolve linked pages

    # Static site (live preview links point back here)
    ASTRO_URL: str = "http://localhost:4321"

    # CMS instance secret, also signs preview tokens
    PAYLOAD_SECRET: str = "your-secret-key-change-me"
    PREVIEW_TOKEN_ALGORITHM: str = "HS256"
    PREVIEW_TOKEN_EXPIRE_MINUTES: int = 60

    # CMS persistence (owned by the CMS, never opened here)
    MONGODB_URI: str = "mongodb://localhost:27017/payload-cms"

    # App Settings
    APP_NAME: str = "CMS Site API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # CORS - accepts JSON string, comma-separated, or list
    # NoDecode: the raw env string reaches parse_cors_origins undecoded
    CORS_ORIGINS: Annotated[list[str], NoDecode] = [
        "http://localhost:4321",
        "http://localhost:3000",
    ]

    @field_validator('PAYLOAD_URL', 'ASTRO_URL')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip('/')

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(',')]
        return v

    @model_validator(mode='after')
    def include_site_origin(self):
        origins = [origin for origin in self.CORS_ORIGINS if origin]
        if self.ASTRO_URL and self.ASTRO_URL not in origins:
            origins.append(self.ASTRO_URL)
        self.CORS_ORIGINS = origins
        return self

    @property
    def api_url(self) -> str:
        """Base URL of the Payload REST API."""
        return f"{self.PAYLOAD_URL}/api"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
