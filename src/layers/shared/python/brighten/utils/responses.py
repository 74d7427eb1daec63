"""API response helper functions."""

import json
import os
from datetime import datetime
from typing import Any

from pydantic import BaseModel as PydanticBaseModel

# Localhost origins are echoed back in dev only
_ALLOWED_ORIGIN = os.environ.get("CORS_ALLOWED_ORIGIN", "https://dev.brightensolution.com")
_STAGE = os.environ.get("STAGE", "dev")


def _get_cors_origin(request_origin: str | None = None) -> str:
    """Get the appropriate CORS origin for the response."""
    if _STAGE == "dev" and request_origin:
        if request_origin.startswith("http://localhost:"):
            return request_origin

    return _ALLOWED_ORIGIN


def get_cors_headers(request_origin: str | None = None) -> dict:
    """Get CORS headers with the appropriate origin."""
    return {
        "Access-Control-Allow-Origin": _get_cors_origin(request_origin),
        "Access-Control-Allow-Headers": "Content-Type,Authorization,Cookie",
        "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
        "Access-Control-Allow-Credentials": "true",
        "Content-Type": "application/json",
    }


CORS_HEADERS = get_cors_headers()


def _json_serializer(obj: Any) -> Any:
    """JSON serializer for objects not serializable by default."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, PydanticBaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def _serialize(data: Any) -> str:
    """Serialize data to JSON string."""
    return json.dumps(data, default=_json_serializer)


def success(data: Any, status_code: int = 200) -> dict:
    """Create a successful API response.

    Args:
        data: Response data (dict, list, or Pydantic model).
        status_code: HTTP status code (default 200).

    Returns:
        API Gateway response dict.
    """
    if isinstance(data, PydanticBaseModel):
        body = data.model_dump(mode="json", by_alias=True)
    else:
        body = data

    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": _serialize(body),
    }


def created(data: Any) -> dict:
    """Create a 201 Created response."""
    return success(data, status_code=201)


def text(body: str, content_type: str, filename: str | None = None) -> dict:
    """Create a non-JSON 200 response (CSV exports).

    Args:
        body: Response body.
        content_type: MIME type of the body.
        filename: Optional download filename.

    Returns:
        API Gateway response dict.
    """
    headers = {**CORS_HEADERS, "Content-Type": content_type}
    if filename:
        headers["Content-Disposition"] = f'attachment; filename="{filename}"'

    return {
        "statusCode": 200,
        "headers": headers,
        "body": body,
    }


def error(
    message: str,
    status_code: int = 500,
    error_code: str | None = None,
    details: dict | None = None,
) -> dict:
    """Create an error API response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        error_code: Machine-readable error code.
        details: Additional error details.

    Returns:
        API Gateway response dict.
    """
    body: dict[str, Any] = {
        "error": True,
        "message": message,
    }

    if error_code:
        body["error_code"] = error_code
    if details:
        body["details"] = details

    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": _serialize(body),
    }


def from_exception(exc: Any) -> dict:
    """Create an error response from a BrightenError."""
    return error(
        exc.message,
        status_code=exc.status_code,
        error_code=exc.error_code,
        details=exc.details or None,
    )


def not_found(resource_type: str, resource_id: str) -> dict:
    """Create a 404 Not Found response.

    Args:
        resource_type: Type of resource (e.g., "Service").
        resource_id: ID or slug of the resource.

    Returns:
        API Gateway response dict.
    """
    return error(
        message=f"{resource_type} not found",
        status_code=404,
        error_code="NOT_FOUND",
        details={"resource_type": resource_type, "resource_id": resource_id},
    )


def unauthorized(message: str = "Authentication required") -> dict:
    """Create a 401 Unauthorized response."""
    return error(
        message=message,
        status_code=401,
        error_code="UNAUTHORIZED",
    )


def paginated(
    items: list[Any],
    total: int,
    page: int = 1,
    limit: int = 10,
) -> dict:
    """Create a paginated response.

    Args:
        items: List of items for current page.
        total: Total number of matching items.
        page: Current page number (1-based).
        limit: Items per page.

    Returns:
        API Gateway response dict.
    """
    body = {
        "items": items,
        "pagination": {
            "total": total,
            "page": page,
            "limit": limit,
            "pages": (total + limit - 1) // limit if limit > 0 else 0,
        },
    }

    return success(body)


def listing(result: Any) -> dict:
    """Render a service ListResult.

    A bare array of items, or ``{items, pagination}`` when the listing was paged.
    """
    items = [item.to_api() for item in result.items]
    if not result.paginated:
        return success(items)
    return paginated(items, total=result.total, page=result.page, limit=result.limit)
