"""Site content API handler.

Serves every simple content type through one set of routes. Reads are
public; writes need an admin token (checked by the authorizer and again
here).
"""

from typing import Any

import structlog

from brighten.services.content_service import ContentService
from brighten.utils.auth import require_admin
from brighten.utils.exceptions import BrightenError, NotFoundError
from brighten.utils.http import parse_body, path_segments, query_int, query_params
from brighten.utils.responses import created, error, from_exception, listing, not_found, success

logger = structlog.get_logger()

CONTENT_ROUTES = (
    "services",
    "products",
    "portfolio",
    "team",
    "achievements",
    "values",
    "testimonials",
    "gallery",
)


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle content API requests.

    Routes:
        GET    /api/{type}
        POST   /api/{type}
        GET    /api/{type}/slug/{slug}
        GET    /api/{type}/{id}
        PUT    /api/{type}/{id}
        DELETE /api/{type}/{id}
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        path_params = event.get("pathParameters", {}) or {}
        segments = path_segments(event)

        content_type = path_params.get("content_type") or (segments[0] if segments else "")
        if content_type not in CONTENT_ROUTES:
            return not_found("Content type", content_type)

        service = ContentService(content_type)

        slug = path_params.get("slug")
        if not slug and len(segments) == 3 and segments[1] == "slug":
            slug = segments[2]
        item_id = path_params.get("id") or (segments[1] if len(segments) == 2 else None)

        if slug:
            if http_method == "GET":
                return success(service.get_by_slug(slug).to_api())
            return error("Method not allowed", 405)

        if http_method == "GET" and item_id:
            return success(service.get_by_id(item_id).to_api())
        elif http_method == "GET":
            return list_items(service, event)
        elif http_method == "POST" and not item_id:
            require_admin(event)
            return create_item(service, event)
        elif http_method == "PUT" and item_id:
            require_admin(event)
            return update_item(service, item_id, event)
        elif http_method == "DELETE" and item_id:
            require_admin(event)
            return delete_item(service, item_id)
        else:
            return error("Method not allowed", 405)

    except NotFoundError as e:
        return not_found(e.resource_type, e.resource_id)
    except BrightenError as e:
        return from_exception(e)
    except Exception as e:
        logger.exception("Content handler error", error=str(e))
        return error("Internal server error", 500)


def list_items(service: ContentService, event: dict) -> dict:
    """List active items.

    Query params:
        page, limit: Paginate the result
        isActive: "false" lists inactive items (team, achievements, values)
        plus the per-type filters (category, department, featured, ...)
    """
    params = query_params(event)
    result = service.list(
        params,
        page=query_int(params, "page"),
        limit=query_int(params, "limit"),
    )
    return listing(result)


def create_item(service: ContentService, event: dict) -> dict:
    item = service.create(parse_body(event))
    return created(item.to_api())


def update_item(service: ContentService, item_id: str, event: dict) -> dict:
    item = service.update(item_id, parse_body(event))
    return success(item.to_api())


def delete_item(service: ContentService, item_id: str) -> dict:
    service.delete(item_id)
    return success({"deleted": True, "id": item_id})
