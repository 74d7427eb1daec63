"""Admin authentication helpers.

Admin tokens are HS256 JWTs. The Lambda authorizer validates them and passes
the claims downstream in ``requestContext.authorizer``; handlers only read
that context.
"""

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
import structlog

from brighten.utils.exceptions import UnauthorizedError

logger = structlog.get_logger()

DEFAULT_ISSUER = "brighten-admin"
DEFAULT_TOKEN_TTL_HOURS = 168


@dataclass
class AuthContext:
    """Authenticated admin identity extracted from an API Gateway event."""

    admin_id: str
    email: str | None = None


def _secret() -> str:
    secret = os.environ.get("ADMIN_JWT_SECRET")
    if not secret:
        raise UnauthorizedError("Admin authentication is not configured")
    return secret


def _issuer() -> str:
    return os.environ.get("ADMIN_JWT_ISSUER", DEFAULT_ISSUER)


def issue_admin_token(admin_id: str, email: str, ttl_hours: int | None = None) -> str:
    """Mint a signed admin token.

    Args:
        admin_id: Admin account ID (becomes the ``sub`` claim).
        email: Admin email.
        ttl_hours: Token lifetime. Defaults to ADMIN_TOKEN_TTL_HOURS or one week.

    Returns:
        Encoded JWT.
    """
    if ttl_hours is None:
        ttl_hours = int(os.environ.get("ADMIN_TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS))

    now = datetime.now(timezone.utc)
    claims = {
        "sub": admin_id,
        "email": email,
        "iss": _issuer(),
        "iat": now,
        "exp": now + timedelta(hours=ttl_hours),
    }
    return jwt.encode(claims, _secret(), algorithm="HS256")


def decode_admin_token(token: str) -> dict[str, Any]:
    """Validate an admin token and return its claims.

    Raises:
        UnauthorizedError: If the token is expired, tampered with or malformed.
    """
    try:
        return jwt.decode(
            token,
            _secret(),
            algorithms=["HS256"],
            issuer=_issuer(),
            options={"require": ["sub", "exp", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid admin token", error=str(e))
        raise UnauthorizedError("Invalid token")


def get_auth_context(event: dict[str, Any]) -> AuthContext:
    """Extract the admin identity from an API Gateway event.

    Args:
        event: API Gateway event dict.

    Returns:
        AuthContext for the calling admin.

    Raises:
        UnauthorizedError: If no authorizer context is present.
    """
    request_context = event.get("requestContext", {}) or {}
    authorizer = request_context.get("authorizer", {}) or {}

    # HTTP APIs nest Lambda authorizer output under "lambda"
    context = authorizer.get("lambda", authorizer)

    admin_id = context.get("adminId") or context.get("admin_id") or context.get("sub")
    if not admin_id:
        logger.warning("No admin ID in auth context", path=event.get("path"))
        raise UnauthorizedError()

    return AuthContext(admin_id=admin_id, email=context.get("email"))


def require_admin(event: dict[str, Any]) -> AuthContext:
    """Ensure the request comes from an authenticated admin.

    Raises:
        UnauthorizedError: If the request is not authenticated.
    """
    return get_auth_context(event)
