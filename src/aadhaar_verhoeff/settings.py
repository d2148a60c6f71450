"""
Settings for the Aadhaar validation API and client

Uses pydantic-settings. Every value can be overridden through an
AADHAAR_-prefixed environment variable, e.g.:

    export AADHAAR_API_BASE_URL=http://validator:8080
    export AADHAAR_CORS_ORIGINS=http://localhost:3000,https://app.example.com
"""

from functools import lru_cache
from typing import Annotated, List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

# API paths, shared by the server routes and the client
VALIDATE_PATH = "/api/validate"
CHECK_DIGIT_PATH = "/api/check-digit"
TRACE_PATH = "/api/trace"
HEALTH_PATH = "/health"


class AadhaarSettings(BaseSettings):
    """Configuration for the validation API, its client and logging"""

    api_base_url: str = Field(
        default="http://localhost:8080", description="Root URL the client talks to"
    )
    request_timeout: float = Field(
        default=10.0, gt=0, description="Client request timeout in seconds"
    )

    # React dev server by default
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000"], description="Origins allowed by CORS"
    )
    api_host: str = Field(default="127.0.0.1", description="API server host")
    api_port: int = Field(default=8080, ge=1, le=65535, description="API server port")

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        """Accept a comma separated string from the environment"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    model_config = {
        "env_prefix": "AADHAAR_",
        "case_sensitive": False,
    }


@lru_cache(maxsize=1)
def get_settings() -> AadhaarSettings:
    """
    Load settings on first use

    Importing the package never reads the environment, so a bad
    variable only fails the API, client or logging setup that needs it.
    """
    return AadhaarSettings()


def reload_settings() -> AadhaarSettings:
    """Drop the cached settings and read the environment again"""
    get_settings.cache_clear()
    return get_settings()
