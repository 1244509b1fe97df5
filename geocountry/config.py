import logging
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    geoip_url: str = "https://ipinfo.io/json"
    request_timeout: float = 5.0
    log_level: str = "INFO"
    debug: bool = False

    @field_validator("geoip_url")
    @classmethod
    def validate_geoip_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("https://", "http://")):
            raise ValueError("geoip_url must be an HTTP(S) URL")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log_level: {v}")
        return level

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
