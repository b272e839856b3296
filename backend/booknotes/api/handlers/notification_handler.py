"""
Notification Handler

Inbox endpoints. Every route acts on the caller's own notifications only.

Endpoints:
==========
    GET   /notifications              → newest 30 (?unread=1 for unread only)
    GET   /notifications/unread-count → badge value
    PATCH /notifications/read-all     → mark all read
    PATCH /notifications/{id}/read    → mark one read (no-op if not the caller's)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from booknotes.shared.schemas.notification import (
    MarkReadResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from booknotes.shared.services.notification_service import NotificationService
from booknotes.api.dependencies import CurrentUser
from booknotes.api.dependencies.services import get_notification_service


router = APIRouter()


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    current_user: CurrentUser,
    unread: bool = Query(False, description="Only unread notifications"),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """List the caller's most recent notifications, newest first."""
    entries = await notification_service.list_notifications(
        current_user.id,
        unread_only=unread,
    )
    return [NotificationResponse.from_entry(entry) for entry in entries]


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    current_user: CurrentUser,
    notification_service: NotificationService = Depends(get_notification_service),
):
    count = await notification_service.unread_count(current_user.id)
    return UnreadCountResponse(count=count)


@router.patch("/read-all", response_model=MarkReadResponse)
async def mark_all_read(
    current_user: CurrentUser,
    notification_service: NotificationService = Depends(get_notification_service),
):
    updated = await notification_service.mark_all_read(current_user.id)
    return MarkReadResponse(updated=updated)


@router.patch("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: UUID,
    current_user: CurrentUser,
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Mark one notification read.

    Succeeds with updated=0 when the id is unknown or belongs to someone else.
    """
    updated = await notification_service.mark_read(notification_id, current_user.id)
    return MarkReadResponse(updated=1 if updated else 0)
