"""
Connection graph engine: the request/accept/decline/remove state machine.

Per unordered pair {A, B} an edge is NONE -> PENDING(A->B) -> ACCEPTED,
and PENDING or ACCEPTED edges are deleted back to NONE. Accept and decline
match the exact (requester, addressee) direction; existence checks and
removal use the direction-independent pair key.
"""
import logging
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy import case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.core.utils import pair_key
from app.db.base import utcnow
from app.models.connection import Connection, ConnectionStatus
from app.models.user import User

logger = logging.getLogger(__name__)


def find_edge(db: Session, user_a: UUID, user_b: UUID) -> Optional[Connection]:
    """Return the edge between two users in either direction, if any."""
    return db.query(Connection).filter(
        Connection.pair_key == pair_key(user_a, user_b)
    ).first()


def _ensure_users_exist(db: Session, *user_ids: UUID) -> None:
    unique_ids = set(user_ids)
    found = db.query(User.id).filter(User.id.in_(unique_ids)).count()
    if found != len(unique_ids):
        raise NotFoundError("user_not_found", "User not found")


def send_request(db: Session, requester_id: UUID, addressee_id: UUID) -> Connection:
    """Create a pending edge requester -> addressee."""
    if requester_id == addressee_id:
        raise ValidationError("self_request", "Cannot send connection request to yourself")

    _ensure_users_exist(db, requester_id, addressee_id)

    if find_edge(db, requester_id, addressee_id):
        raise ConflictError("connection_exists", "Connection request already exists")

    now = utcnow()
    connection = Connection(
        requester_id=requester_id,
        addressee_id=addressee_id,
        pair_key=pair_key(requester_id, addressee_id),
        status=ConnectionStatus.PENDING,
        created_at=now,
        updated_at=now
    )
    db.add(connection)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if find_edge(db, requester_id, addressee_id):
            logger.info("Connection race lost for %s -> %s", requester_id, addressee_id)
            raise ConflictError("connection_exists", "Connection request already exists")
        # Otherwise a user was deleted after the existence check
        _ensure_users_exist(db, requester_id, addressee_id)
        raise
    db.refresh(connection)

    logger.info("Connection request %s -> %s sent", requester_id, addressee_id)
    return connection


def _pending_request(db: Session, requester_id: UUID, addressee_id: UUID):
    return db.query(Connection).filter(
        Connection.requester_id == requester_id,
        Connection.addressee_id == addressee_id,
        Connection.status == ConnectionStatus.PENDING
    )


def accept_request(db: Session, addressee_id: UUID, requester_id: UUID) -> None:
    """Move PENDING(requester -> addressee) to ACCEPTED. Only the addressee can call this."""
    updated = _pending_request(db, requester_id, addressee_id).update(
        {Connection.status: ConnectionStatus.ACCEPTED, Connection.updated_at: utcnow()},
        synchronize_session=False
    )
    if updated == 0:
        db.rollback()
        raise NotFoundError("request_not_found", "Pending connection request not found")
    db.commit()
    logger.info("Connection request %s -> %s accepted", requester_id, addressee_id)


def decline_request(db: Session, addressee_id: UUID, requester_id: UUID) -> None:
    """Delete PENDING(requester -> addressee)."""
    deleted = _pending_request(db, requester_id, addressee_id).delete(synchronize_session=False)
    if deleted == 0:
        db.rollback()
        raise NotFoundError("request_not_found", "Pending connection request not found")
    db.commit()
    logger.info("Connection request %s -> %s declined", requester_id, addressee_id)


def remove_connection(db: Session, user_id: UUID, friend_id: UUID) -> None:
    """Delete the accepted edge between the pair, whoever sent the original request."""
    deleted = db.query(Connection).filter(
        Connection.pair_key == pair_key(user_id, friend_id),
        Connection.status == ConnectionStatus.ACCEPTED
    ).delete(synchronize_session=False)
    if deleted == 0:
        db.rollback()
        raise NotFoundError("friendship_not_found", "Friendship not found")
    db.commit()
    logger.info("Connection between %s and %s removed", user_id, friend_id)


def list_connections(db: Session, user_id: UUID) -> List[Tuple[Connection, User]]:
    """Accepted edges touching user_id with the other party, ordered by their display name."""
    other_party = case(
        (Connection.requester_id == user_id, Connection.addressee_id),
        else_=Connection.requester_id
    )
    return db.query(Connection, User).join(User, User.id == other_party).filter(
        (Connection.requester_id == user_id) | (Connection.addressee_id == user_id),
        Connection.status == ConnectionStatus.ACCEPTED
    ).order_by(User.display_name.asc(), User.id.asc()).all()


def list_pending_incoming(db: Session, user_id: UUID) -> List[Tuple[Connection, User]]:
    """Pending edges addressed to user_id with the requester, most recent first."""
    return db.query(Connection, User).join(User, User.id == Connection.requester_id).filter(
        Connection.addressee_id == user_id,
        Connection.status == ConnectionStatus.PENDING
    ).order_by(Connection.created_at.desc(), Connection.id.asc()).all()
