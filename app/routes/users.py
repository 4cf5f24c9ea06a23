from __future__ import annotations

from flask import Blueprint, current_app, request

from app.services.base import ServiceError, ValidationError
from app.utils.responses import error_response, success_response


def create_users_blueprint(*, user_service, logger):
    """Create user management routes with injected dependencies."""
    blueprint = Blueprint('users', __name__)

    def internal_failure(error: str, exc: Exception):
        message = str(exc) if current_app.config.get('EXPOSE_ERROR_DETAILS') else 'Something went wrong!'
        return error_response(error, message, 500)

    def json_body():
        """Parsed JSON body, or None when the request carries no JSON.

        A JSON content type with an unparseable body is a client error.
        """
        body = request.get_json(silent=True)
        if body is None and request.is_json and request.get_data(cache=True):
            raise ValidationError('Request body must be valid JSON')
        return body

    @blueprint.route('/api/users', methods=['GET'])
    def list_users():
        """Get all users."""
        logger.info(f"Get all users requested from IP: {request.remote_addr}")
        try:
            users = user_service.list_all()
            return success_response('Users retrieved successfully', users, count=len(users))
        except ServiceError:
            raise
        except Exception as e:
            logger.exception(f"Failed to list users: {e}")
            return internal_failure('Failed to retrieve users', e)

    @blueprint.route('/api/users/<user_id>', methods=['GET'])
    @blueprint.route('/api/users/<user_id>/profile', methods=['GET'])
    def get_user(user_id):
        """Get one user by id (also served as the profile alias)."""
        logger.info(f"Get user {user_id} requested from IP: {request.remote_addr}")
        try:
            user = user_service.get_by_id(user_id)
            return success_response('User retrieved successfully', user)
        except ServiceError:
            raise
        except Exception as e:
            logger.exception(f"Failed to get user {user_id}: {e}")
            return internal_failure('Failed to retrieve user', e)

    @blueprint.route('/api/users', methods=['POST'])
    def create_user():
        """Register a new user."""
        logger.info(f"Create user requested from IP: {request.remote_addr}")
        try:
            data = json_body()
            if not isinstance(data, dict):
                data = {}
            user = user_service.create(
                data.get('username'),
                data.get('email'),
                data.get('password'),
                data.get('role'),
            )
            return success_response('User created successfully', user, 201)
        except ServiceError:
            raise
        except Exception as e:
            logger.exception(f"Failed to create user: {e}")
            return internal_failure('Failed to create user', e)

    @blueprint.route('/api/users/<user_id>', methods=['PUT'])
    def update_user(user_id):
        """Update fields of an existing user."""
        logger.info(f"Update user {user_id} requested from IP: {request.remote_addr}")
        try:
            updates = json_body()
            if updates is None:
                updates = {}
            user = user_service.update(user_id, updates)
            return success_response('User updated successfully', user)
        except ServiceError:
            raise
        except Exception as e:
            logger.exception(f"Failed to update user {user_id}: {e}")
            return internal_failure('Failed to update user', e)

    @blueprint.route('/api/users/<user_id>', methods=['DELETE'])
    def delete_user(user_id):
        """Delete a user permanently."""
        logger.info(f"Delete user {user_id} requested from IP: {request.remote_addr}")
        try:
            deleted = user_service.delete(user_id)
            return success_response('User deleted successfully', deleted)
        except ServiceError:
            raise
        except Exception as e:
            logger.exception(f"Failed to delete user {user_id}: {e}")
            return internal_failure('Failed to delete user', e)

    return blueprint
