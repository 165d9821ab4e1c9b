"""Application settings loaded from the environment."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bastion.core.config.enums import Environment


class Settings(BaseSettings):
    """Bastion settings.

    Values are read from environment variables (and an optional ``.env`` file):

        ENVIRONMENT=prd
        LOG_LEVEL=DEBUG
        QUOTA_ENFORCEMENT_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    ENVIRONMENT: Environment = Field(Environment.LOCAL, description="Deployment environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level for the bastion logger")
    LOCAL_DEVELOPMENT: bool = Field(
        False, description="Local development mode; disables quota enforcement"
    )
    QUOTA_ENFORCEMENT_ENABLED: bool = Field(
        True, description="Whether route and memory quotas are enforced on creation"
    )

    @model_validator(mode="after")
    def validate_log_level(self):
        """Normalize the log level and reject unknown names."""
        level = self.LOG_LEVEL.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Invalid LOG_LEVEL: {self.LOG_LEVEL}")
        self.LOG_LEVEL = level
        return self

    @property
    def enforce_quotas(self) -> bool:
        """Quotas are enforced unless disabled or running in local development."""
        if self.LOCAL_DEVELOPMENT:
            return False
        return self.QUOTA_ENFORCEMENT_ENABLED
