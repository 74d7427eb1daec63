"""Utility functions and helpers."""

from brighten.utils.responses import success, created, error, not_found, paginated, from_exception
from brighten.utils.auth import get_auth_context, require_admin, AuthContext
from brighten.utils.exceptions import (
    BrightenError,
    NotFoundError,
    ValidationError,
    UnauthorizedError,
    ConflictError,
)
from brighten.utils.http import parse_body, query_params, query_int, get_cookie, path_segments
from brighten.utils.slugs import slugify

__all__ = [
    # Response helpers
    "success",
    "created",
    "error",
    "not_found",
    "paginated",
    "from_exception",
    # Auth
    "get_auth_context",
    "require_admin",
    "AuthContext",
    # Exceptions
    "BrightenError",
    "NotFoundError",
    "ValidationError",
    "UnauthorizedError",
    "ConflictError",
    # Request helpers
    "parse_body",
    "query_params",
    "query_int",
    "get_cookie",
    "path_segments",
    # Slugs
    "slugify",
]
