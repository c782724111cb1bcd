# Web API Package
"""Common utilities for webapi endpoints."""

import logging
import sqlite3

import flask

from infra_inventory.spec.validation import ValidationError

# Filter value meaning "no filter" (sent by the dashboard's select boxes)
FILTER_ALL = "all"


def success_response(data, status_code: int = 200):
    """Create a success response.

    Args:
        data: Response data (will be JSON serialized)
        status_code: HTTP status code (default: 200)

    Returns:
        Flask JSON response with {"success": True, "data": data}
    """
    return flask.jsonify({"success": True, "data": data}), status_code


def error_response(message: str, status_code: int = 404):
    """Create an error response.

    Args:
        message: Error message
        status_code: HTTP status code (default: 404)

    Returns:
        Flask JSON response with {"success": False, "error": message} and status code
    """
    return flask.jsonify({"success": False, "error": message}), status_code


def validation_error_response(label: str, error: ValidationError):
    """Create a 400 response listing every validation error."""
    return flask.jsonify({
        "success": False,
        "error": f"Invalid {label} data",
        "errors": error.errors,
    }), 400


def get_json_body():
    """Get the JSON request body; missing or malformed bodies count as empty objects."""
    body = flask.request.get_json(silent=True)
    return {} if body is None else body


def get_filter_arg(name: str, allow_all: bool = True) -> str | None:
    """Get a list filter from the query string ("" and, for select boxes, "all" mean no filter)."""
    value = flask.request.args.get(name, "").strip()
    if value == "" or (allow_all and value == FILTER_ALL):
        return None
    return value


def register_error_handlers(blueprint: flask.Blueprint, label: str) -> None:
    """Answer storage failures of the blueprint's routes with a JSON 500."""

    @blueprint.errorhandler(sqlite3.Error)
    @blueprint.errorhandler(OverflowError)
    def handle_db_error(error):  # noqa: ARG001
        logging.exception("Failed to access %s data", label)
        return error_response(f"Failed to access {label} data", 500)
