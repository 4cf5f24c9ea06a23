from __future__ import annotations

from flask import jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from app.services.base import ServiceError
from app.utils.clock import utc_timestamp
from app.utils.responses import error_response

AVAILABLE_ROUTES = [
    '/',
    '/api/health',
    '/api/health/metrics',
    '/api/users',
    '/register',
]


def register_error_handlers(app, *, logger, available_routes=None):
    """Translate service errors and unmatched routes into JSON responses."""
    routes = list(available_routes or AVAILABLE_ROUTES)

    @app.errorhandler(ServiceError)
    def handle_service_error(error: ServiceError):
        if error.status_code >= 500:
            logger.error(f"Service error on {request.method} {request.path}: {error.message}")
        else:
            logger.warning(f"{error.error} on {request.method} {request.path}: {error.message}")
        extra = {}
        if 'required' in error.details:
            extra['required'] = error.details['required']
        return error_response(error.error, error.message, error.status_code, **extra)

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        return jsonify({
            'error': 'Route not found',
            'message': f'Cannot {request.method} {request.full_path.rstrip("?")}',
            'availableRoutes': routes,
            'tip': 'Visit the available routes listed above',
            'timestamp': utc_timestamp(),
        }), 404

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error):
        return error_response('Method not allowed', f'Cannot {request.method} {request.path}', 405)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return error_response(error.name, error.description, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {error}")
        message = str(error) if app.config.get('EXPOSE_ERROR_DETAILS') else 'Something went wrong!'
        return jsonify({
            'success': False,
            'error': 'Internal Server Error',
            'message': message,
            'timestamp': utc_timestamp(),
        }), 500

    return app
