"""Security tests for admin authentication.

These tests verify that:
- The authorizer only allows correctly signed, unexpired admin tokens
- Every mutating route rejects requests without an admin context
- Public reads and visitor reports stay open
"""

import json
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from brighten.utils.auth import decode_admin_token, issue_admin_token
from brighten.utils.exceptions import UnauthorizedError

METHOD_ARN = "arn:aws:execute-api:us-east-1:123456789012:abc123/test/POST/api/services"


def _authorizer_event(token: str | None) -> dict:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    return {"type": "REQUEST", "methodArn": METHOD_ARN, "headers": headers}


def _effect(policy: dict) -> str:
    return policy["policyDocument"]["Statement"][0]["Effect"]


class TestAdminAuthorizer:
    """Tests for the API Gateway admin authorizer."""

    def test_valid_token_is_allowed(self):
        from authorizer.admin_authorizer import handler

        token = issue_admin_token("admin-1", "admin@brightensolution.com")

        policy = handler(_authorizer_event(token), None)

        assert _effect(policy) == "Allow"
        assert policy["principalId"] == "admin-1"
        assert policy["context"] == {"adminId": "admin-1", "email": "admin@brightensolution.com"}
        assert policy["policyDocument"]["Statement"][0]["Resource"] == (
            "arn:aws:execute-api:us-east-1:123456789012:abc123/test/*"
        )

    def test_missing_token_is_denied(self):
        from authorizer.admin_authorizer import handler

        assert _effect(handler(_authorizer_event(None), None)) == "Deny"

    def test_expired_token_is_denied(self):
        from authorizer.admin_authorizer import handler

        token = issue_admin_token("admin-1", "admin@brightensolution.com", ttl_hours=-1)

        assert _effect(handler(_authorizer_event(token), None)) == "Deny"

    def test_token_signed_with_other_secret_is_denied(self):
        from authorizer.admin_authorizer import handler

        now = datetime.now(timezone.utc)
        forged = jwt.encode(
            {"sub": "admin-1", "iss": "brighten-admin", "exp": now + timedelta(hours=1)},
            "some-other-secret-of-enough-length",
            algorithm="HS256",
        )

        assert _effect(handler(_authorizer_event(forged), None)) == "Deny"

    def test_wrong_issuer_is_denied(self):
        from authorizer.admin_authorizer import handler

        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "admin-1", "iss": "someone-else", "exp": now + timedelta(hours=1)},
            "test-admin-secret-with-enough-length",
            algorithm="HS256",
        )

        assert _effect(handler(_authorizer_event(token), None)) == "Deny"

    def test_garbage_token_is_denied(self):
        from authorizer.admin_authorizer import handler

        assert _effect(handler(_authorizer_event("not.a.jwt"), None)) == "Deny"

    def test_identity_source_token(self):
        from authorizer.admin_authorizer import handler

        token = issue_admin_token("admin-2", "ops@brightensolution.com")
        event = {"routeArn": METHOD_ARN, "identitySource": [f"Bearer {token}"]}

        assert _effect(handler(event, None)) == "Allow"


class TestTokenHelpers:
    def test_round_trip_claims(self):
        claims = decode_admin_token(issue_admin_token("admin-1", "a@example.com"))

        assert claims["sub"] == "admin-1"
        assert claims["email"] == "a@example.com"

    def test_expired_message(self):
        token = issue_admin_token("admin-1", "a@example.com", ttl_hours=-1)

        with pytest.raises(UnauthorizedError) as exc_info:
            decode_admin_token(token)

        assert exc_info.value.message == "Token has expired"


@pytest.mark.parametrize(
    "module,method,path",
    [
        ("api.content", "POST", "/api/services"),
        ("api.content", "PUT", "/api/products/abc"),
        ("api.content", "DELETE", "/api/team/abc"),
        ("api.blog", "POST", "/api/blog"),
        ("api.blog", "PUT", "/api/blog/abc"),
        ("api.blog", "GET", "/api/admin/blog"),
        ("api.experience", "POST", "/api/experience"),
        ("api.experience", "DELETE", "/api/experience/abc"),
        ("api.sections", "PUT", "/api/about/hero"),
        ("api.sections", "POST", "/api/about/story"),
        ("api.sections", "POST", "/api/admin/hero-section"),
        ("api.visitors", "GET", "/api/visitors"),
        ("api.visitors", "GET", "/api/visitors/export"),
        ("api.visitors", "DELETE", "/api/visitors/abc"),
    ],
)
def test_admin_routes_reject_anonymous_requests(dynamodb_table, api_gateway_event, module, method, path):
    """Handlers re-check the admin context even behind the authorizer."""
    import importlib

    handler = importlib.import_module(module).handler

    response = handler(api_gateway_event(method=method, path=path, body={"title": "x"}), None)

    assert response["statusCode"] == 401
    assert json.loads(response["body"])["error"] is True


@pytest.mark.parametrize(
    "module,method,path",
    [
        ("api.content", "GET", "/api/services"),
        ("api.blog", "GET", "/api/blog"),
        ("api.experience", "GET", "/api/experience"),
        ("api.sections", "GET", "/api/about/hero"),
        ("api.sections", "GET", "/api/admin/hero-section"),
    ],
)
def test_public_reads_need_no_token(dynamodb_table, api_gateway_event, module, method, path):
    import importlib

    handler = importlib.import_module(module).handler

    assert handler(api_gateway_event(method=method, path=path), None)["statusCode"] == 200


def test_storage_report_needs_no_token(dynamodb_table, api_gateway_event):
    from api.storage_data import handler

    event = api_gateway_event(method="POST", path="/api/storage-data", body={"storageData": {}})

    assert json.loads(handler(event, None)["body"])["success"] is True
