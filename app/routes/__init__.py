"""Routes package."""
from .errors import register_error_handlers
from .health import create_health_blueprint
from .pages import create_pages_blueprint
from .users import create_users_blueprint

__all__ = [
    'create_health_blueprint',
    'create_pages_blueprint',
    'create_users_blueprint',
    'register_error_handlers',
]
