"""
Environment settings for initialized-counter.
Loads INITIALIZED_COUNTER_* variables used to seed the runtime configuration.
"""
from typing import List

from pydantic_settings import BaseSettings


class CounterSettings(BaseSettings):
    """Counter settings loaded from environment variables."""

    disabled: bool = False  # Start with counting switched off globally
    ignored_classes: str = ""  # Comma-separated class names or import paths
    reporter: str = "stdout"  # stdout or log
    log_threshold: int = 2  # Minimum loads per key before the log reporter mentions it

    @property
    def ignored_classes_list(self) -> List[str]:
        """Convert comma-separated ignored class names to list."""
        return [name.strip() for name in self.ignored_classes.split(",") if name.strip()]

    class Config:
        env_prefix = "INITIALIZED_COUNTER_"
        extra = "ignore"


# Global settings instance
settings = CounterSettings()
