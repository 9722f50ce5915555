"""Configuration."""
from src.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
