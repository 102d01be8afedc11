"""Configuration loading."""

from shelfsearch.config.settings import Settings

__all__ = ["Settings"]
