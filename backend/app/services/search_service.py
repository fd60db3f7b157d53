"""
Search ranker for user discovery.

Candidates are users whose username or display name contains the query
(case-insensitive). They are ranked by tier:

    1. exact match on username or display name
    2. query is a prefix of username or display name
    3. substring match anywhere

Within a tier: exact username before exact display name, then shorter
username, then shorter display name, then username order. Ranking and
the limit are applied in SQL so only `limit` rows are fetched.
"""
import logging
from typing import List, Optional
from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.errors import ValidationError
from app.models.user import User

logger = logging.getLogger(__name__)

TIER_EXACT = 1
TIER_PREFIX = 2
TIER_SUBSTRING = 3


def _char_length(db: Session, column):
    # MySQL LENGTH counts bytes
    if db.get_bind().dialect.name == "mysql":
        return func.char_length(column)
    return func.length(column)


def validate_limit(limit: Optional[int]) -> int:
    """Default when omitted; out-of-range values are rejected rather than clamped."""
    if limit is None:
        return settings.SEARCH_DEFAULT_LIMIT
    if limit < 1 or limit > settings.SEARCH_MAX_LIMIT:
        raise ValidationError(
            "invalid_request",
            f"limit must be between 1 and {settings.SEARCH_MAX_LIMIT}"
        )
    return limit


def search_users(db: Session, query: str, limit: Optional[int] = None) -> List[User]:
    """Return up to `limit` users matching `query`, best match first."""
    if not query:
        raise ValidationError("invalid_request", "Search query parameter 'q' is required")
    limit = validate_limit(limit)

    q = query.lower()
    username = func.lower(User.username)
    display_name = func.lower(User.display_name)

    tier = case(
        (or_(username == q, display_name == q), TIER_EXACT),
        (or_(username.startswith(q, autoescape=True),
             display_name.startswith(q, autoescape=True)), TIER_PREFIX),
        else_=TIER_SUBSTRING
    )

    users = db.query(User).filter(or_(
        username.contains(q, autoescape=True),
        display_name.contains(q, autoescape=True)
    )).order_by(
        tier,
        case((username == q, 0), else_=1),
        case((display_name == q, 0), else_=1),
        _char_length(db, User.username),
        _char_length(db, User.display_name),
        User.username
    ).limit(limit).all()

    logger.debug(f"Search '{query}' returned {len(users)} users (limit {limit})")
    return users
