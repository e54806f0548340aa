"""Configuration settings for fifo-semaphore using Pydantic."""

from functools import lru_cache
from typing import Any, Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


class SemaphoreSettings(BaseSettings):
    """Default options applied to semaphores that don't set them explicitly.

    Environment Variables:
        FIFO_SEMAPHORE_DEBUG: Emit a diagnostic trace of every state transition
        FIFO_SEMAPHORE_NAME: Label used in diagnostic traces
    """

    model_config = SettingsConfigDict(
        env_prefix="FIFO_SEMAPHORE_",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    name: str = ""

    def model_dump(self, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        """Get settings as a dictionary."""
        return super().model_dump(*args, **kwargs)

    @classmethod
    def get_settings(cls, **kwargs: Any) -> "SemaphoreSettings":
        """Create settings with optional overrides."""
        return cls(**kwargs)


settings = SemaphoreSettings()


@lru_cache()
def get_settings() -> SemaphoreSettings:
    """Get the global settings instance.

    Returns:
        SemaphoreSettings: The global settings instance.

    Note:
        This function is cached to avoid re-reading environment variables.
        To refresh settings, call get_settings.cache_clear()
    """
    return settings


def configure_settings(**kwargs: Any) -> None:
    """Configure global settings with overrides.

    Args:
        **kwargs: Keyword arguments to override default settings.

    Example:
        >>> configure_settings(debug=True, name="db-pool")
    """
    global settings
    settings = SemaphoreSettings.get_settings(**kwargs)
    get_settings.cache_clear()
