"""Pytest configuration and fixtures."""

import json
import os

import pytest

# Set environment variables before imports
os.environ["TABLE_NAME"] = "brighten-test"
os.environ["STAGE"] = "test"
os.environ["ADMIN_JWT_SECRET"] = "test-admin-secret-with-enough-length"
os.environ["ADMIN_JWT_ISSUER"] = "brighten-admin"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_table(aws_credentials):
    """Create mocked DynamoDB table."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName="brighten-test",
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()

        yield table


@pytest.fixture
def service_payload():
    """A valid service create payload."""
    return {
        "title": "My New Service!!",
        "description": "Websites that convert.",
        "icon": "Code",
        "image": "/images/web.jpg",
        "content": "<p>Full description</p>",
    }


@pytest.fixture
def blog_payload():
    """A valid blog post create payload."""
    return {
        "title": "Launching Our New Site",
        "excerpt": "What changed and why.",
        "content": "<p>We rebuilt everything.</p>",
        "category": "News",
        "tags": ["launch", "web"],
        "author": {"name": "Brighten Team"},
    }


@pytest.fixture
def api_gateway_event():
    """Create a sample API Gateway event.

    Admin events carry the authorizer context that the admin authorizer
    would have attached.
    """
    def _create_event(
        method: str = "GET",
        path: str = "/",
        path_params: dict = None,
        query_params: dict = None,
        body: dict | str = None,
        admin: bool = False,
        cookie: str = None,
    ):
        headers = {"Content-Type": "application/json"}
        if cookie:
            headers["Cookie"] = cookie

        request_context = {}
        if admin:
            request_context["authorizer"] = {
                "adminId": "admin-1",
                "email": "admin@brightensolution.com",
            }

        return {
            "httpMethod": method,
            "path": path,
            "pathParameters": path_params or {},
            "queryStringParameters": query_params or {},
            "body": body if isinstance(body, str) else (json.dumps(body) if body else None),
            "headers": headers,
            "requestContext": request_context,
        }

    return _create_event
