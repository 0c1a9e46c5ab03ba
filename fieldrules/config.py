from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console
    LOG_EVALUATIONS: bool = False  # Emit a debug event per composite evaluation
    
    # Construction
    STRICT_BOUNDS: bool = True  # Reject min > max at construction
    
    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level
    
    class Config:
        env_prefix = "FIELDRULES_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
