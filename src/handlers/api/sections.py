"""Page section API handler.

Each section is a single document that is seeded with default content the
first time it is read.
"""

from typing import Any

import structlog

from brighten.services.content_service import section_service
from brighten.utils.auth import require_admin
from brighten.utils.exceptions import BrightenError, NotFoundError
from brighten.utils.http import parse_body, path_segments
from brighten.utils.responses import created, error, from_exception, not_found, success

logger = structlog.get_logger()

SECTION_ROUTES = {
    ("about", "hero"): "about-hero",
    ("about", "story"): "our-story",
    ("admin", "hero-section"): "hero-section",
}


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle page section requests.

    Routes:
        GET       /api/about/hero
        PUT|POST  /api/about/hero
        GET       /api/about/story
        PUT|POST  /api/about/story
        GET       /api/admin/hero-section
        PUT|POST  /api/admin/hero-section
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        segments = tuple(path_segments(event))

        name = SECTION_ROUTES.get(segments)
        if not name:
            return not_found("Section", "/".join(segments))

        service = section_service(name)

        if http_method == "GET":
            return success(service.get_or_seed().to_api())
        elif http_method in ("PUT", "POST"):
            require_admin(event)
            item, is_new = service.save(parse_body(event))
            return created(item.to_api()) if is_new else success(item.to_api())
        else:
            return error("Method not allowed", 405)

    except NotFoundError as e:
        return not_found(e.resource_type, e.resource_id)
    except BrightenError as e:
        return from_exception(e)
    except Exception as e:
        logger.exception("Section handler error", error=str(e))
        return error("Internal server error", 500)
