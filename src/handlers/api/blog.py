"""Blog API handler."""

from typing import Any

import structlog

from brighten.services.content_service import BlogService
from brighten.utils.auth import require_admin
from brighten.utils.exceptions import BrightenError, NotFoundError
from brighten.utils.http import parse_body, path_segments, query_int, query_params
from brighten.utils.responses import created, error, from_exception, listing, not_found, success

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle blog API requests.

    Routes:
        GET    /api/blog
        POST   /api/blog
        GET    /api/blog/categories
        GET    /api/blog/tags
        GET    /api/blog/slug/{slug}
        GET    /api/blog/{id}
        PUT    /api/blog/{id}
        DELETE /api/blog/{id}
        GET    /api/admin/blog
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        path_params = event.get("pathParameters", {}) or {}
        segments = path_segments(event)

        service = BlogService()

        if segments[:1] == ["admin"]:
            require_admin(event)
            if http_method == "GET":
                return list_posts(service, event, include_drafts=True)
            return error("Method not allowed", 405)

        rest = segments[1:]

        if rest == ["categories"] and http_method == "GET":
            return success(service.categories())
        if rest == ["tags"] and http_method == "GET":
            return success(service.tags())

        slug = path_params.get("slug") or (rest[1] if len(rest) == 2 and rest[0] == "slug" else None)
        if slug:
            if http_method == "GET":
                return success(service.get_published_by_slug(slug).to_api())
            return error("Method not allowed", 405)

        post_id = path_params.get("id") or (rest[0] if len(rest) == 1 else None)

        if http_method == "GET" and post_id:
            return success(service.get_by_id(post_id).to_api())
        elif http_method == "GET":
            return list_posts(service, event)
        elif http_method == "POST" and not post_id:
            require_admin(event)
            post = service.create(parse_body(event))
            return created(post.to_api())
        elif http_method == "PUT" and post_id:
            require_admin(event)
            post = service.update(post_id, parse_body(event))
            return success(post.to_api())
        elif http_method == "DELETE" and post_id:
            require_admin(event)
            service.delete(post_id)
            return success({"deleted": True, "id": post_id})
        else:
            return error("Method not allowed", 405)

    except NotFoundError as e:
        return not_found(e.resource_type, e.resource_id)
    except BrightenError as e:
        return from_exception(e)
    except Exception as e:
        logger.exception("Blog handler error", error=str(e))
        return error("Internal server error", 500)


def list_posts(service: BlogService, event: dict, include_drafts: bool = False) -> dict:
    """List posts, newest first, ten per page by default.

    Query params:
        page, limit: Pagination
        category, tag, featured, search: Filters
    """
    params = query_params(event)
    result = service.list(
        params,
        page=query_int(params, "page", 1),
        limit=query_int(params, "limit"),
        include_inactive=include_drafts,
    )
    return listing(result)
