"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management
- genres: Genre input normalization

Usage:
======
    from booknotes.shared.utils import SecurityUtils, parse_genres
"""

from booknotes.shared.utils.security import SecurityUtils
from booknotes.shared.utils.genres import parse_genres

__all__ = [
    "SecurityUtils",
    "parse_genres",
]
