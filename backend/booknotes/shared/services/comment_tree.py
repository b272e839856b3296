"""
Comment Thread Builder

Turns the flat, chronologically ordered comment list of one book into a
forest of threads.

    flat input (created_at, id ascending)        output
    ─────────────────────────────────────        ──────────────────
    c1  parent=None                              c1
    c2  parent=c1                                ├── c2
    c3  parent=None                              │   └── c4
    c4  parent=c2                                └── c5
    c5  parent=c1                                c3
    c6  parent=<deleted or foreign>              c6

Two passes over the input, no recursion:
    1. index every node by id
    2. attach each node to its parent's children, or to the roots when it
       has no parent or the parent is not in the input
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional
from uuid import UUID


@dataclass(frozen=True)
class CommentEntry:
    """A comment as shown in a thread, with its author's public profile."""

    id: UUID
    book_id: UUID
    user_id: UUID
    parent_id: Optional[UUID]
    content: str
    created_at: datetime
    author_name: str = ""
    author_avatar: Optional[str] = None


@dataclass
class CommentNode:
    """A comment plus its direct replies, in input order."""

    comment: Any
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> UUID:
        return self.comment.id

    @property
    def parent_id(self) -> Optional[UUID]:
        return self.comment.parent_id


def build_comment_tree(comments: Iterable[Any]) -> list[CommentNode]:
    """
    Build the reply forest for one book.

    Args:
        comments: Objects exposing ``id`` and ``parent_id``, ordered by
            (created_at, id) ascending

    Returns:
        Root nodes in input order. Every input comment appears exactly once
        in the forest; a comment whose parent is missing becomes a root.
    """
    nodes = [CommentNode(comment=comment) for comment in comments]
    index = {node.id: node for node in nodes}

    roots: list[CommentNode] = []
    for node in nodes:
        parent = index.get(node.parent_id) if node.parent_id is not None else None
        if parent is not None:
            parent.children.append(node)
        else:
            roots.append(node)

    return roots
