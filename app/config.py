"""
Application configuration management
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "EscapeMap"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_PREFIX: str = "/api/v1"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Backend REST collaborator
    BACKEND_API_URL: str = "http://localhost:8080/api/v1"
    BACKEND_TIMEOUT_SECONDS: float = 10.0

    @field_validator("BACKEND_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Geocoding (Kakao local search)
    KAKAO_API_URL: str = "https://dapi.kakao.com/v2/local/search/address.json"
    KAKAO_REST_API_KEY: Optional[str] = None

    # Redis (persisted client state)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_MAX_CONNECTIONS: int = 20

    # Map rendering
    MAP_MIN_ZOOM_TO_SHOW: float = 13
    MAP_CLUSTER_ZOOM: float = 16
    MAP_CLUSTER_DISTANCE: float = 0.05
    MAP_DEFAULT_CENTER_LAT: float = 37.498095
    MAP_DEFAULT_CENTER_LNG: float = 127.027610

    @model_validator(mode="after")
    def validate_zoom_bands(self) -> "Settings":
        if self.MAP_MIN_ZOOM_TO_SHOW > self.MAP_CLUSTER_ZOOM:
            raise ValueError("MAP_MIN_ZOOM_TO_SHOW must not exceed MAP_CLUSTER_ZOOM")
        if self.MAP_CLUSTER_DISTANCE <= 0:
            raise ValueError("MAP_CLUSTER_DISTANCE must be positive")
        return self

    # Reports
    REPORT_DEFAULT_POSTER_URL: str = (
        "https://images.unsplash.com/photo-1519074069444-1ba4fff66d16"
        "?q=80&w=1000&auto=format&fit=crop"
    )
    REPORT_DEFAULT_TAG: str = "신규"

    # List feed
    FEED_AD_INTERVAL: int = 5

    # Seed data is used when the backend cannot be reached at startup
    SEED_ON_BACKEND_FAILURE: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Monitoring
    PROMETHEUS_ENABLED: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_DIR: str = "logs"

    @field_validator("CORS_ORIGINS", mode="before")
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def is_testing(self) -> bool:
        return self.APP_ENV == "testing"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


# Create global settings instance
settings = Settings()
