"""
Book Schemas

Request/response models for book summaries, likes and genres.

Genres:
=======
Requests accept genres either as a JSON list of strings or as one string
separated by commas or newlines:

    {"genres": ["self-help", "psychology"]}
    {"genres": "self-help, psychology"}
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field

from booknotes.shared.schemas.common import BaseSchema
from booknotes.shared.services.book_service import BookDetail, BookSummary


GenresInput = Optional[Union[list[str], str]]


class BookCreate(BaseModel):
    """Schema for creating a book summary."""

    title: str = Field(max_length=500)
    content: str
    genres: GenresInput = None
    cover_url: Optional[str] = None
    source_url: Optional[str] = None


class BookUpdate(BaseModel):
    """Partial book update. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, max_length=500)
    content: Optional[str] = None
    genres: GenresInput = None
    cover_url: Optional[str] = None
    source_url: Optional[str] = None


class BookSummaryResponse(BaseSchema):
    """One entry of the search listing."""

    id: str
    title: str
    cover_url: Optional[str] = None
    genres: list[str]
    source_url: Optional[str] = None
    created_at: datetime
    author_id: str
    author_name: str
    like_count: int
    comment_count: int

    @classmethod
    def from_summary(cls, summary: BookSummary) -> "BookSummaryResponse":
        return cls(
            id=str(summary.id),
            title=summary.title,
            cover_url=summary.cover_url,
            genres=summary.genres,
            source_url=summary.source_url,
            created_at=summary.created_at,
            author_id=str(summary.author_id),
            author_name=summary.author_name,
            like_count=summary.like_count,
            comment_count=summary.comment_count,
        )


class BookResponse(BaseSchema):
    """A full book with its author's name."""

    id: str
    user_id: str
    title: str
    content: str
    genres: list[str]
    cover_url: Optional[str] = None
    source_url: Optional[str] = None
    created_at: datetime
    author_name: str

    @classmethod
    def from_detail(cls, detail: BookDetail) -> "BookResponse":
        return cls(
            id=str(detail.id),
            user_id=str(detail.user_id),
            title=detail.title,
            content=detail.content,
            genres=detail.genres,
            cover_url=detail.cover_url,
            source_url=detail.source_url,
            created_at=detail.created_at,
            author_name=detail.author_name,
        )


class LikeResponse(BaseModel):
    """State of the caller's like after a toggle."""

    liked: bool
    like_count: int
