"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from booknotes.config.settings import settings

    db_url = settings.DATABASE_URL
    inbox_cap = settings.NOTIFICATION_INBOX_LIMIT
"""

from booknotes.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
