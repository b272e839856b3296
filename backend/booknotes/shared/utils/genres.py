"""
Genre list normalization.

Genres arrive either as a JSON list of strings or as a single free-text
string separated by commas and/or newlines (the form field of the web
client). Both are normalized to the same ordered list.
"""

import re
from typing import Any, Optional

from booknotes.config.settings import settings
from booknotes.shared.core.exceptions import ValidationError


_SEPARATORS = re.compile(r"[,\n\r]+")


def parse_genres(raw: Any, limit: Optional[int] = None) -> list[str]:
    """
    Normalize a genre input to a list of trimmed, non-empty labels.

    Order is preserved and duplicates are kept. Anything past ``limit``
    (default settings.MAX_GENRES_PER_BOOK) is dropped.

    Raises:
        ValidationError: If ``raw`` is not None, a string, or a list of strings
    """
    max_genres = settings.MAX_GENRES_PER_BOOK if limit is None else limit

    if raw is None:
        return []

    if isinstance(raw, str):
        parts = _SEPARATORS.split(raw)
    elif isinstance(raw, (list, tuple)):
        if not all(isinstance(item, str) for item in raw):
            raise ValidationError("Genres must be strings", details={"field": "genres"})
        parts = list(raw)
    else:
        raise ValidationError(
            "Genres must be a list or a comma-separated string",
            details={"field": "genres"},
        )

    genres = [part.strip() for part in parts if part.strip()]
    return genres[:max_genres]
