from .settings import CounterSettings, settings
from .store import CounterConfig

__all__ = ["CounterConfig", "CounterSettings", "settings"]
