"""Configuration management for the Bright Sky client."""

from __future__ import annotations

from .settings import BrightSkySettings, get_settings, reset_settings

__all__ = ["BrightSkySettings", "get_settings", "reset_settings"]
