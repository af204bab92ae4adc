"""Configuration module for the user directory application."""
from .settings import AppConfig, load_settings

__all__ = ["AppConfig", "load_settings"]
