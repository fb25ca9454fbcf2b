"""
Shared pytest fixtures for the User service test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by giving every test its own ``UserStore`` and its own
application bound to that store.

Key Concepts Demonstrated:
- Dependency injection of the store into the app factory
- Test data factories
- Test client creation
- Live threaded server for real concurrent HTTP traffic
"""

import os
import threading
from collections.abc import Generator

import pytest
from faker import Faker
from werkzeug.serving import make_server

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from user_app import create_app
from user_app.models import User
from user_app.store import UserStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def store() -> UserStore:
    """
    Provide a fresh, empty store for each test.

    Returns:
        A new ``UserStore`` with no users.
    """
    return UserStore()


@pytest.fixture(scope="function")
def app(store):
    """
    Create an application instance bound to the test's store.

    Args:
        store: Store fixture injected into the app factory.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing", store=store)
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    The test client allows you to make requests to the app
    without running a real server.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def live_server(app) -> Generator[str, None, None]:
    """
    Serve the app from a threaded werkzeug server on a free port.

    Each incoming request is handled on its own thread, which is how the
    service runs in production, so requests made against this URL really
    do reach the store concurrently.

    Yields:
        str: Base URL of the running server.
    """
    server = make_server(app.config["HOST"], app.config["PORT"], app, threaded=True)
    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()

    yield f"http://{server.host}:{server.server_port}"

    server.shutdown()
    server_thread.join(timeout=5)


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory(store):
    """
    Factory fixture for creating users directly in the store.

    Args:
        store: Store fixture.

    Returns:
        Function that creates and returns User instances.

    Example:
        def test_something(user_factory):
            user = user_factory(name="Alice")
            assert user.id
    """

    def _create_user(name: str | None = None, email: str | None = None) -> User:
        return store.create(
            name if name is not None else fake.name(),
            email if email is not None else fake.email(),
        )

    return _create_user


@pytest.fixture
def sample_user(user_factory) -> User:
    """Create a single sample user for tests that need one."""
    return user_factory(name="Sample User", email="sample@example.com")


@pytest.fixture
def multiple_users(user_factory) -> list[User]:
    """
    Create several users, two of which share a name.

    Returns:
        List of User instances.
    """
    return [
        user_factory(name="Alice", email="alice@example.com"),
        user_factory(name="Bob", email="bob@example.com"),
        user_factory(name="Carol", email="carol@example.com"),
        user_factory(name="Bob", email="bob.two@example.com"),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_user_data() -> dict[str, str]:
    """
    Provide form data for POST/PUT/PATCH requests.

    Returns:
        Dictionary with name and email values.
    """
    return {"name": fake.name(), "email": fake.email()}
