"""
Genre Handler

Exposes the genre catalogue used by the web client's filter chips.
"""

from fastapi import APIRouter, Depends

from booknotes.shared.services.book_service import BookService
from booknotes.api.dependencies.services import get_book_service


router = APIRouter()


@router.get("", response_model=list[str])
async def list_genres(
    book_service: BookService = Depends(get_book_service),
):
    """Sorted distinct genres across all books."""
    return await book_service.list_genres()
