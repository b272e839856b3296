"""
Enums used across the application.
"""

from enum import Enum


class NotificationType(str, Enum):
    """What the actor did to trigger a notification."""

    LIKE = "like"
    REPLY = "reply"
