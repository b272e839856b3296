"""
Comment Schemas

Request/response models for comment threads. Responses are recursive: each
comment carries its replies in ``children``.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from booknotes.shared.schemas.common import BaseSchema
from booknotes.shared.services.comment_tree import CommentNode


class CommentCreate(BaseModel):
    """Schema for posting a comment or a reply."""

    content: str = Field(max_length=5000)
    parent_id: Optional[UUID] = None


class CommentResponse(BaseSchema):
    """A comment with its author and its replies."""

    id: str
    book_id: str
    user_id: str
    parent_id: Optional[str] = None
    content: str
    created_at: datetime
    author_name: str
    author_avatar: Optional[str] = None
    children: list["CommentResponse"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentResponse":
        comment = node.comment
        return cls(
            id=str(comment.id),
            book_id=str(comment.book_id),
            user_id=str(comment.user_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            created_at=comment.created_at,
            author_name=comment.author_name,
            author_avatar=comment.author_avatar,
            children=[cls.from_node(child) for child in node.children],
        )
