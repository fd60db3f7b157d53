"""
Utility functions for the application.
"""
from typing import Any, Dict, Tuple
from uuid import UUID
from app.core.errors import ValidationError


def parse_identifier(value: str, field: str = "id") -> UUID:
    """Parse a string-encoded identifier, rejecting malformed input."""
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError("invalid_id", f"Invalid {field} format")


def canonical_pair(a: UUID, b: UUID) -> Tuple[UUID, UUID]:
    """Order two identifiers so {a, b} and {b, a} map to the same tuple."""
    return (a, b) if str(a) <= str(b) else (b, a)


def pair_key(a: UUID, b: UUID) -> str:
    """Direction-independent lookup key for an unordered pair."""
    low, high = canonical_pair(a, b)
    return f"{low}:{high}"


def format_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    """Format API response."""
    response = {"message": message}
    if data is not None:
        response["data"] = data
    return response
