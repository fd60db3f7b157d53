"""
Connection (friendship) routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.schemas.connection import ConnectionResponse, ConnectionWithUser
from app.schemas.user import CurrentUser, MessageResponse, UserPublic
from app.api.dependencies import get_current_user
from app.core.utils import format_response, parse_identifier
from app.services import connection_service

router = APIRouter(prefix="/connections", tags=["connections"])


def _with_user(rows) -> List[ConnectionWithUser]:
    return [
        ConnectionWithUser(
            connection=ConnectionResponse.model_validate(connection),
            user=UserPublic.model_validate(user)
        )
        for connection, user in rows
    ]


@router.post("/send-request/{addressee_id}", response_model=MessageResponse,
             status_code=status.HTTP_201_CREATED)
def send_request(
    addressee_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Send a connection request to another user."""
    connection_service.send_request(db, current_user.id, parse_identifier(addressee_id, "addressee ID"))
    return format_response(None, "Connection request sent successfully")


@router.post("/accept-request/{requester_id}", response_model=MessageResponse)
def accept_request(
    requester_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Accept a pending request addressed to the caller."""
    connection_service.accept_request(db, current_user.id, parse_identifier(requester_id, "requester ID"))
    return format_response(None, "Connection request accepted successfully")


@router.post("/decline-request/{requester_id}", response_model=MessageResponse)
def decline_request(
    requester_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Decline a pending request addressed to the caller."""
    connection_service.decline_request(db, current_user.id, parse_identifier(requester_id, "requester ID"))
    return format_response(None, "Connection request declined successfully")


@router.delete("/remove-friend/{friend_id}", response_model=MessageResponse)
def remove_friend(
    friend_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Remove an accepted connection."""
    connection_service.remove_connection(db, current_user.id, parse_identifier(friend_id, "friend ID"))
    return format_response(None, "Friendship removed successfully")


@router.get("", response_model=List[ConnectionWithUser])
def list_connections(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's friends."""
    return _with_user(connection_service.list_connections(db, current_user.id))


@router.get("/pending", response_model=List[ConnectionWithUser])
def list_pending(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List incoming pending requests."""
    return _with_user(connection_service.list_pending_incoming(db, current_user.id))
