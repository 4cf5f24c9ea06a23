from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from app.utils.clock import utc_timestamp


def create_health_blueprint(*, metrics_service, version: str, app_env: str, port: int, timezone: str, logger):
    """Create health and metrics routes with injected dependencies."""
    blueprint = Blueprint('health', __name__)

    def error_detail(exc: Exception) -> str:
        if current_app.config.get('EXPOSE_ERROR_DETAILS'):
            return str(exc)
        return 'Something went wrong!'

    @blueprint.route('/api/health')
    @blueprint.route('/api/health/status')
    def health_check():
        """Health check endpoint for load balancers and monitoring."""
        logger.info(f"Health check requested from IP: {request.remote_addr}")
        try:
            health = {
                'status': 'healthy',
                'message': 'Server is running fine right now',
                'timestamp': utc_timestamp(),
                'version': version,
                'environment': app_env,
                'uptime': metrics_service.uptime_seconds(),
                'memory': metrics_service.memory_summary(),
            }
            return jsonify(health), 200
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return jsonify({
                'status': 'unhealthy',
                'message': 'Server experiencing issues',
                'error': error_detail(e),
                'timestamp': utc_timestamp(),
            }), 503

    @blueprint.route('/api/health/metrics')
    def detailed_metrics():
        """Detailed process metrics for admins and monitoring."""
        logger.info(f"Detailed metrics requested from IP: {request.remote_addr}")
        try:
            return jsonify({
                'server': metrics_service.server_info(),
                'memory': metrics_service.memory_usage(),
                'environment': {
                    'appEnv': app_env,
                    'port': port,
                    'timezone': timezone,
                },
                'timestamp': utc_timestamp(),
            })
        except Exception as e:
            logger.error(f"Failed to collect metrics: {e}")
            return jsonify({'error': 'Failed to retrieve metrics', 'message': error_detail(e)}), 500

    @blueprint.route('/api/health/ping')
    def ping():
        return jsonify({'status': 'pong', 'timestamp': utc_timestamp()})

    return blueprint
