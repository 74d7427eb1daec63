"""Tests for the blog API handler."""

import json

from brighten.services.content_service import BlogService


def _parse_body(response: dict) -> dict:
    """Parse JSON response body."""
    return json.loads(response["body"])


class TestBlogHandler:
    """Tests for public and admin blog routes."""

    def test_public_list_only_shows_published(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        blog = BlogService()
        blog.create({**blog_payload, "isPublished": True})
        blog.create({**blog_payload, "title": "Draft Post"})

        body = _parse_body(handler(api_gateway_event(method="GET", path="/api/blog"), None))

        assert [p["title"] for p in body["items"]] == ["Launching Our New Site"]
        assert body["pagination"] == {"total": 1, "page": 1, "limit": 10, "pages": 1}
        assert body["items"][0]["publishedAt"]

    def test_admin_list_includes_drafts(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        blog = BlogService()
        blog.create({**blog_payload, "isPublished": True})
        blog.create({**blog_payload, "title": "Draft Post"})

        denied = handler(api_gateway_event(method="GET", path="/api/admin/blog"), None)
        allowed = handler(api_gateway_event(method="GET", path="/api/admin/blog", admin=True), None)

        assert denied["statusCode"] == 401
        assert _parse_body(allowed)["pagination"]["total"] == 2

    def test_get_by_slug_counts_views(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        BlogService().create({**blog_payload, "isPublished": True})
        event = api_gateway_event(method="GET", path="/api/blog/slug/launching-our-new-site")

        handler(event, None)
        body = _parse_body(handler(event, None))

        assert body["views"] == 2
        assert body["author"] == {"name": "Brighten Team", "avatar": ""}

    def test_draft_slug_is_not_found(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        BlogService().create(blog_payload)
        event = api_gateway_event(method="GET", path="/api/blog/slug/launching-our-new-site")

        response = handler(event, None)

        assert response["statusCode"] == 404
        assert _parse_body(response)["message"] == "Blog post not found"

    def test_categories_and_tags(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        BlogService().create({**blog_payload, "isPublished": True})

        categories = handler(api_gateway_event(method="GET", path="/api/blog/categories"), None)
        tags = handler(api_gateway_event(method="GET", path="/api/blog/tags"), None)

        assert _parse_body(categories) == ["News"]
        assert _parse_body(tags) == ["launch", "web"]

    def test_create_and_publish(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        create = api_gateway_event(method="POST", path="/api/blog", body=blog_payload, admin=True)
        draft = _parse_body(handler(create, None))

        assert draft["slug"] == "launching-our-new-site"
        assert draft["isPublished"] is False
        assert draft["readingTime"] == "5 min read"
        assert "publishedAt" not in draft or draft["publishedAt"] is None

        publish = api_gateway_event(
            method="PUT",
            path=f"/api/blog/{draft['id']}",
            body={"isPublished": True},
            admin=True,
        )
        published = _parse_body(handler(publish, None))

        assert published["isPublished"] is True
        assert published["publishedAt"]

    def test_create_requires_author(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        payload = {k: v for k, v in blog_payload.items() if k != "author"}
        event = api_gateway_event(method="POST", path="/api/blog", body=payload, admin=True)

        response = handler(event, None)

        assert response["statusCode"] == 400

    def test_delete_requires_admin(self, dynamodb_table, api_gateway_event, blog_payload):
        from api.blog import handler

        post = BlogService().create(blog_payload)

        denied = handler(api_gateway_event(method="DELETE", path=f"/api/blog/{post.id}"), None)
        deleted = handler(
            api_gateway_event(method="DELETE", path=f"/api/blog/{post.id}", admin=True), None
        )

        assert denied["statusCode"] == 401
        assert _parse_body(deleted) == {"deleted": True, "id": post.id}
