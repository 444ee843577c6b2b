"""Data models for the library catalog."""

from .config import CatalogConfig, load_config, save_config

__all__ = ["CatalogConfig", "load_config", "save_config"]
