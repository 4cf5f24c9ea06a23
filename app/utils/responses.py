"""JSON response envelope shared by the API routes."""
from __future__ import annotations

from typing import Any, Optional

from flask import jsonify

from app.utils.clock import utc_timestamp


def envelope(
    *,
    success: bool,
    message: Optional[str] = None,
    data: Any = None,
    error: Optional[str] = None,
    **extra: Any,
) -> dict:
    body: dict = {'success': success}
    if message is not None:
        body['message'] = message
    if data is not None:
        body['data'] = data
    if error is not None:
        body['error'] = error
    body.update(extra)
    body['timestamp'] = utc_timestamp()
    return body


def success_response(message: str, data: Any = None, status: int = 200, **extra: Any):
    return jsonify(envelope(success=True, message=message, data=data, **extra)), status


def error_response(error: str, message: str, status: int, **extra: Any):
    return jsonify(envelope(success=False, error=error, message=message, **extra)), status
