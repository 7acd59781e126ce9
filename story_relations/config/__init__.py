"""Modulo configurazione."""

from .settings import Config, DataConfig, DisplayConfig, LoggingConfig

__all__ = ["Config", "DataConfig", "DisplayConfig", "LoggingConfig"]
