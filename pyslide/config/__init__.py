"""Configuration module."""

from pyslide.config.settings import SlideSettings

__all__ = ["SlideSettings"]
