"""Visitor tracking API handler (public).

Receives storage snapshots and page views from the site and upserts the
visitor record keyed by the ``visitor_id`` cookie.
"""

from typing import Any

import structlog

from brighten.services.visitor_service import VisitorService
from brighten.tracking.identity import VISITOR_ID_KEY
from brighten.utils.exceptions import BrightenError
from brighten.utils.http import get_cookie, parse_body, path_segments
from brighten.utils.responses import success

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle visitor tracking requests.

    Routes:
        POST /api/storage-data
        POST /api/tracking/page-view
    """
    http_method = event.get("httpMethod", "").upper()
    segments = path_segments(event)

    if http_method != "POST":
        return _failure("Method not allowed", 405)

    try:
        body = parse_body(event)
        visitor_id = get_cookie(event, VISITOR_ID_KEY)
        service = VisitorService()

        if segments[-1:] == ["page-view"]:
            visitor = service.record_page_view(body, visitor_id=visitor_id)
        else:
            visitor, _ = service.record_storage_report(body, visitor_id=visitor_id)

        return success({"success": True, "visitorId": visitor.visitor_id})

    except BrightenError as e:
        return _failure(e.message, e.status_code)
    except Exception as e:
        logger.exception("Storage data handler error", error=str(e))
        return _failure("Failed to process storage data", 500)


def _failure(message: str, status_code: int) -> dict:
    return success({"success": False, "message": message}, status_code=status_code)
