"""
Pytest fixtures for the user registry API tests
"""
import pytest

from app import create_app
from app.config import TestingConfig
from app.repositories import UserRepository
from app.services import UserService


@pytest.fixture
def app():
    """Create application for testing"""
    flask_app = create_app(TestingConfig)
    yield flask_app


@pytest.fixture
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture
def user_service():
    """Registry with an empty collection and a fixed clock"""
    ticks = iter(f'2024-01-01T00:00:{second:02d}.000Z' for second in range(60))
    return UserService(UserRepository(), bcrypt_rounds=4, clock=lambda: next(ticks))


@pytest.fixture
def created_user(client):
    """Register a regular user through the API and return its public view"""
    response = client.post('/api/users', json={
        'username': 'alice',
        'email': 'A@X.com',
        'password': 'p',
    })
    assert response.status_code == 201
    return response.get_json()['data']
