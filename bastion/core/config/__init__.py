"""Configuration module for Bastion.

Usage:
    from bastion.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from bastion.core.config.enums import Environment
from bastion.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "settings",
]

# Singleton settings instance
settings = Settings()
