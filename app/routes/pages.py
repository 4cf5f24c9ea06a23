from __future__ import annotations

from flask import Blueprint, jsonify

from app.utils.clock import utc_timestamp


def create_pages_blueprint(*, version: str):
    """Create the API index and legacy pointer routes."""
    blueprint = Blueprint('pages', __name__)

    @blueprint.route('/')
    def index():
        """API information."""
        return jsonify({
            'message': 'User Registry API Server',
            'version': version,
            'timestamp': utc_timestamp(),
            'endpoints': {
                'health': '/api/health',
                'users': '/api/users',
            },
        })

    @blueprint.route('/register')
    def legacy_register():
        """Point old registration clients at the users API."""
        return jsonify({
            'message': 'Please use /api/users for user registration',
            'redirectTo': '/api/users',
            'method': 'POST',
            'timestamp': utc_timestamp(),
        })

    return blueprint
