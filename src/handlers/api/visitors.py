"""Visitor admin API handler.

All routes require an admin token.
"""

from datetime import datetime, timezone
from typing import Any

import structlog

from brighten.services.visitor_service import DEFAULT_VISITOR_PAGE_SIZE, VisitorService
from brighten.utils.auth import require_admin
from brighten.utils.exceptions import BrightenError, NotFoundError
from brighten.utils.http import parse_body, path_segments, query_flag, query_int, query_params
from brighten.utils.responses import error, from_exception, not_found, paginated, success, text

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle visitor admin requests.

    Routes:
        GET    /api/visitors
        GET    /api/visitors/export
        GET    /api/visitors/{id}
        PUT    /api/visitors/{id}
        DELETE /api/visitors/{id}
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        path_params = event.get("pathParameters", {}) or {}
        segments = path_segments(event)

        require_admin(event)
        service = VisitorService()

        if segments[1:] == ["export"]:
            if http_method == "GET":
                return export_visitors(service, event)
            return error("Method not allowed", 405)

        visitor_id = path_params.get("id") or (segments[1] if len(segments) == 2 else None)

        if http_method == "GET" and visitor_id:
            return success(service.get(visitor_id).to_api())
        elif http_method == "GET":
            return list_visitors(service, event)
        elif http_method == "PUT" and visitor_id:
            visitor = service.update(visitor_id, parse_body(event))
            return success(visitor.to_api())
        elif http_method == "DELETE" and visitor_id:
            service.delete(visitor_id)
            return success({"deleted": True, "id": visitor_id})
        else:
            return error("Method not allowed", 405)

    except NotFoundError as e:
        return not_found(e.resource_type, e.resource_id)
    except BrightenError as e:
        return from_exception(e)
    except Exception as e:
        logger.exception("Visitors handler error", error=str(e))
        return error("Internal server error", 500)


def _status_filter(params: dict[str, str]) -> str | None:
    status = params.get("status")
    return status if status and status != "all" else None


def list_visitors(service: VisitorService, event: dict) -> dict:
    """List visitors, most recent first.

    Query params:
        status: Lead status, or "all"
        search: Visitor ID, contact name or email
        page, limit: Pagination (default 50 per page)
    """
    params = query_params(event)
    result = service.list(
        status=_status_filter(params),
        search=params.get("search") or None,
        page=query_int(params, "page", 1),
        limit=query_int(params, "limit", DEFAULT_VISITOR_PAGE_SIZE),
    )
    items = [visitor.to_api() for visitor in result.items]
    return paginated(items, total=result.total, page=result.page, limit=result.limit)


def export_visitors(service: VisitorService, event: dict) -> dict:
    """Download visitors as CSV.

    Query params:
        status: Lead status, or "all"
        includeStorage: "true" adds the raw storage columns
    """
    params = query_params(event)
    csv_content, count = service.export_csv(
        status=_status_filter(params),
        include_storage=query_flag(params, "includeStorage"),
    )

    logger.info("Visitors exported", count=count)

    today = datetime.now(timezone.utc).date().isoformat()
    return text(csv_content, "text/csv", filename=f"visitors-export-{today}.csv")
