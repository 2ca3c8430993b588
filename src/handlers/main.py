"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.
"""

from typing import Callable, Dict, Tuple
import json

from handlers import health_check, purchase_tickets


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event carries the HTTP method and path; we route it to the matching
    handler and answer 404 for anything else.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path.rstrip('/')}"

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("POST /purchases", purchase_tickets.lambda_handler),
    )

    for route, handler in route_table:
        if route_key == route:
            return handler(event, context)

    return _response(404, {"message": "Route not found", "route": route_key})
