"""
Configuration package for the member query layer.

This package contains modules for managing application settings,
environment variables, and logging configuration.
"""

from got_members.config.settings import Settings

# Export settings singleton for app-wide use
settings = Settings()

__all__ = ["settings", "Settings"]
