# storefront/api/deps.py
from fastapi import Header

from storefront.domain.errors import FieldError, ValidationError
from storefront.utils.settings import DEFAULT_SESSION_ID

MAX_SESSION_ID_LENGTH = 64


def get_session_id(x_session_id: str | None = Header(default=None)) -> str:
    """Shopper session from the X-Session-Id header; one shared cart when absent."""
    if x_session_id is None:
        return DEFAULT_SESSION_ID

    session_id = x_session_id.strip()
    if not session_id or len(session_id) > MAX_SESSION_ID_LENGTH:
        raise ValidationError(
            "Invalid session id",
            [FieldError("X-Session-Id", f"Must be 1-{MAX_SESSION_ID_LENGTH} characters")],
        )
    return session_id
