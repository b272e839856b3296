"""
Book Handler

Handles book summaries and the social interactions attached to them.

Endpoints:
==========
    GET    /books                    → search listing (?search=&genre=)
    POST   /books                    → create
    GET    /books/{id}               → detail
    PATCH  /books/{id}               → update (author only)
    DELETE /books/{id}               → delete (author only)
    POST   /books/{id}/like          → toggle like
    GET    /books/{id}/comments      → comment threads
    POST   /books/{id}/comments      → comment or reply

Listing and reading are public; every write requires a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from booknotes.shared.schemas.book import (
    BookCreate,
    BookResponse,
    BookSummaryResponse,
    BookUpdate,
    LikeResponse,
)
from booknotes.shared.schemas.comment import CommentCreate, CommentResponse
from booknotes.shared.services.book_service import BookService
from booknotes.shared.services.comment_service import CommentService
from booknotes.shared.services.like_service import LikeService
from booknotes.api.dependencies import CurrentUser
from booknotes.api.dependencies.services import (
    get_book_service,
    get_comment_service,
    get_like_service,
)


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# BOOKS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=list[BookSummaryResponse])
async def search_books(
    search: str = Query("", description="Substring of the title or any genre"),
    genre: str = Query("", description="Exact genre, case-insensitive"),
    book_service: BookService = Depends(get_book_service),
):
    """
    Search books, newest first.

    Returns at most 100 summaries, each with author name and like/comment counts.
    """
    summaries = await book_service.search_books(search=search, genre=genre)
    return [BookSummaryResponse.from_summary(summary) for summary in summaries]


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    data: BookCreate,
    current_user: CurrentUser,
    book_service: BookService = Depends(get_book_service),
):
    """Create a book summary authored by the caller."""
    detail = await book_service.create_book(
        current_user.id,
        title=data.title,
        content=data.content,
        genres=data.genres,
        cover_url=data.cover_url,
        source_url=data.source_url,
    )
    return BookResponse.from_detail(detail)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: UUID,
    book_service: BookService = Depends(get_book_service),
):
    """
    Get a book with its author's name.

    Raises:
        404: If the book does not exist
    """
    detail = await book_service.get_book(book_id)
    return BookResponse.from_detail(detail)


@router.patch("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: UUID,
    data: BookUpdate,
    current_user: CurrentUser,
    book_service: BookService = Depends(get_book_service),
):
    """
    Partially update a book.

    Raises:
        403: If the caller is not the author
        404: If the book does not exist
    """
    detail = await book_service.update_book(
        book_id,
        current_user.id,
        title=data.title,
        content=data.content,
        genres=data.genres,
        cover_url=data.cover_url,
        source_url=data.source_url,
    )
    return BookResponse.from_detail(detail)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: UUID,
    current_user: CurrentUser,
    book_service: BookService = Depends(get_book_service),
):
    """
    Delete a book with its likes, comments and notifications.

    Raises:
        403: If the caller is not the author
        404: If the book does not exist
    """
    await book_service.delete_book(book_id, current_user.id)


# ═══════════════════════════════════════════════════════════════════════════════
# LIKES
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("/{book_id}/like", response_model=LikeResponse)
async def toggle_like(
    book_id: UUID,
    current_user: CurrentUser,
    like_service: LikeService = Depends(get_like_service),
):
    """
    Like the book if the caller hasn't, otherwise remove the like.

    Raises:
        404: If the book does not exist
    """
    result = await like_service.toggle_like(book_id, current_user.id)
    return LikeResponse(liked=result.liked, like_count=result.like_count)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMENTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/{book_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    book_id: UUID,
    comment_service: CommentService = Depends(get_comment_service),
):
    """Get the book's comments as threads, oldest first at every level."""
    roots = await comment_service.list_comments(book_id)
    return [CommentResponse.from_node(node) for node in roots]


@router.post(
    "/{book_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    book_id: UUID,
    data: CommentCreate,
    current_user: CurrentUser,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Post a root comment, or a reply when parent_id is given.

    Raises:
        400: Empty content, or parent on another book
        404: Unknown book or parent comment
    """
    node = await comment_service.create_comment(
        book_id,
        current_user.id,
        data.content,
        parent_id=data.parent_id,
    )
    return CommentResponse.from_node(node)
