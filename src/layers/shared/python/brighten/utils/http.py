"""API Gateway request helpers."""

import json
from typing import Any

from brighten.utils.exceptions import ValidationError


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode a JSON request body.

    Raises:
        ValidationError: If the body is not a JSON object.
    """
    raw = event.get("body") or "{}"
    try:
        body = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError("Invalid JSON body")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def query_params(event: dict[str, Any]) -> dict[str, str]:
    """Get query string parameters (never None)."""
    return event.get("queryStringParameters") or {}


def query_int(params: dict[str, str], name: str, default: int | None = None) -> int | None:
    """Read a positive integer query parameter.

    Raises:
        ValidationError: If the value is not a positive integer.
    """
    value = params.get(name)
    if value in (None, ""):
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValidationError(f"'{name}' must be an integer")
    if number < 1:
        raise ValidationError(f"'{name}' must be at least 1")
    return number


def query_flag(params: dict[str, str], name: str) -> bool:
    """True when a query parameter is literally ``"true"``."""
    return params.get(name) == "true"


def get_cookie(event: dict[str, Any], name: str) -> str | None:
    """Read a cookie from a REST (``Cookie`` header) or HTTP API (``cookies``) event."""
    raw_cookies: list[str] = list(event.get("cookies") or [])

    headers = event.get("headers") or {}
    for key, value in headers.items():
        if key.lower() == "cookie" and value:
            raw_cookies.append(value)

    for raw in raw_cookies:
        value = parse_cookie_string(raw).get(name)
        if value:
            return value

    return None


def parse_cookie_string(raw: str) -> dict[str, str]:
    """Split a ``Cookie`` header or ``document.cookie`` string into name/value pairs.

    Pairs are separated by ``;`` and split on the first ``=`` only, so values
    keep any embedded ``=``, spaces or JSON. Values are not decoded.
    """
    cookies: dict[str, str] = {}
    for part in raw.split(";"):
        part = part.strip()
        if not part:
            continue
        name, sep, value = part.partition("=")
        if not sep:
            continue
        cookies[name.strip()] = value
    return cookies


def path_segments(event: dict[str, Any]) -> list[str]:
    """Path components after the ``/api`` prefix.

    ``/api/services/slug/web-design`` gives ``["services", "slug", "web-design"]``.
    """
    path = event.get("path") or event.get("rawPath") or ""
    parts = [part for part in path.split("/") if part]
    if parts and parts[0] == "api":
        parts = parts[1:]
    return parts
