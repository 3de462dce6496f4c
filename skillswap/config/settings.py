"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union
from urllib.parse import quote_plus

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "SkillSwap Server"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    PORT: int = 4000
    API_PREFIX: str = ""
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # MongoDB
    MONGO_URI: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    MONGO_SCHEME: str = "mongodb"
    MONGO_HOST: str = "localhost:27017"
    MONGO_APP_NAME: str = "SkillSwap"
    MONGO_DB_NAME: str = "SkillSwapDB"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGO_FAIL_FAST: bool = False
    MONGO_CREATE_INDEXES: bool = True

    # Monitoring
    ENABLE_METRICS: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def assemble_mongo_uri(self) -> "Settings":
        if self.MONGO_URI:
            return self
        # Build from individual components if MONGO_URI is not provided
        credentials = ""
        if self.DB_USER and self.DB_PASS:
            credentials = f"{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}@"
        self.MONGO_URI = (
            f"{self.MONGO_SCHEME}://{credentials}{self.MONGO_HOST}/"
            f"?appName={self.MONGO_APP_NAME}"
        )
        return self

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
