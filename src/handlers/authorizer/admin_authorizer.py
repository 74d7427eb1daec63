"""Admin token authorizer for API Gateway.

Validates HS256 admin tokens and passes the admin identity downstream.
"""

from typing import Any

import structlog

from brighten.utils.auth import decode_admin_token
from brighten.utils.exceptions import UnauthorizedError

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Lambda authorizer handler for API Gateway.

    Args:
        event: API Gateway authorizer event.
        context: Lambda context.

    Returns:
        IAM policy document with context.
    """
    token = _extract_token(event)
    if not token:
        logger.warning("No token provided")
        return _deny_policy(event)

    try:
        claims = decode_admin_token(token)
    except UnauthorizedError as e:
        logger.warning("Admin token rejected", reason=e.message)
        return _deny_policy(event)
    except Exception as e:
        logger.exception("Authorizer error", error=str(e))
        return _deny_policy(event)

    auth_context = {
        "adminId": claims["sub"],
        "email": claims.get("email") or "",
    }

    logger.info("Authorization successful", admin_id=auth_context["adminId"])
    return _allow_policy(event, auth_context)


def _extract_token(event: dict) -> str | None:
    """Extract the bearer token from the Authorization header or identity source."""
    headers = event.get("headers", {}) or {}
    auth_header = headers.get("Authorization") or headers.get("authorization")

    if auth_header:
        if auth_header.startswith("Bearer "):
            return auth_header[7:]
        return auth_header

    identity_source = event.get("identitySource") or event.get("authorizationToken")
    if isinstance(identity_source, list):
        identity_source = next((s for s in identity_source if s), None)
    if isinstance(identity_source, str) and identity_source:
        if identity_source.startswith("Bearer "):
            return identity_source[7:]
        return identity_source

    return None


def _allow_policy(event: dict, context: dict) -> dict:
    """Build an allow policy covering every admin route of the API."""
    method_arn = event.get("methodArn", event.get("routeArn", "*"))

    arn_parts = method_arn.split("/")
    if len(arn_parts) >= 2:
        resource_arn = "/".join(arn_parts[:2]) + "/*"
    else:
        resource_arn = "*"

    return {
        "principalId": context["adminId"],
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Allow",
                    "Resource": resource_arn,
                }
            ],
        },
        "context": context,
    }


def _deny_policy(event: dict) -> dict:
    method_arn = event.get("methodArn", event.get("routeArn", "*"))

    return {
        "principalId": "unauthorized",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Deny",
                    "Resource": method_arn,
                }
            ],
        },
    }
