"""Experience section API handler."""

from typing import Any

import structlog

from brighten.services.content_service import ExperienceService
from brighten.utils.auth import require_admin
from brighten.utils.exceptions import BrightenError, NotFoundError
from brighten.utils.http import parse_body, path_segments
from brighten.utils.responses import created, error, from_exception, not_found, success

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle experience API requests.

    Routes:
        GET    /api/experience
        POST   /api/experience
        PUT    /api/experience/{id}
        DELETE /api/experience/{id}
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        path_params = event.get("pathParameters", {}) or {}
        segments = path_segments(event)
        item_id = path_params.get("id") or (segments[1] if len(segments) == 2 else None)

        service = ExperienceService()

        if http_method == "GET" and not item_id:
            current = service.get_current()
            return success(current.to_api() if current else {})
        elif http_method == "POST" and not item_id:
            require_admin(event)
            item, is_new = service.save(parse_body(event))
            return created(item.to_api()) if is_new else success(item.to_api())
        elif http_method == "PUT" and item_id:
            require_admin(event)
            return success(service.update(item_id, parse_body(event)).to_api())
        elif http_method == "DELETE" and item_id:
            require_admin(event)
            service.delete(item_id)
            return success({"deleted": True, "id": item_id})
        else:
            return error("Method not allowed", 405)

    except NotFoundError as e:
        return not_found(e.resource_type, e.resource_id)
    except BrightenError as e:
        return from_exception(e)
    except Exception as e:
        logger.exception("Experience handler error", error=str(e))
        return error("Internal server error", 500)
