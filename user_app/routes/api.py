"""
REST API endpoints for User management.

This module adapts HTTP requests into ``UserStore`` calls. Payloads are
JSON except for the root greeting. Fields are read from form data or the
query string (or a JSON object body); missing fields are empty strings.

Endpoints:
    GET    /                    - Greeting
    GET    /health              - Health check
    GET    /users/all           - All users keyed by ID
    GET    /users/<id>          - Get a single user by ID
    GET    /users/name/<name>   - Get a user by name (empty name: /users/name/)
    POST   /users               - Create a new user
    PUT    /users/<id>          - Replace name and email
    PATCH  /users/<id>          - Update only the non-empty fields
    DELETE /users/<id>          - Delete a user

The older ``/users/update/<id>``, ``/users/updateOne/<id>`` and
``/users/delete/<id>`` paths are kept as aliases.
"""

import logging

from flask import Blueprint, Response, current_app, jsonify, request

from user_app.store import UserNotFoundError, UserStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def get_store() -> UserStore:
    """Return the store bound to the running application."""
    return current_app.extensions["user_store"]


def read_user_fields() -> tuple[str, str]:
    """
    Read ``name`` and ``email`` from the current request.

    A JSON object body takes priority; otherwise form fields are used,
    falling back to the query string. Anything missing or non-string
    becomes an empty string.

    Returns:
        Tuple of (name, email).
    """
    data = request.get_json(silent=True) if request.is_json else None
    if isinstance(data, dict):
        name, email = data.get("name"), data.get("email")
        return (
            name if isinstance(name, str) else "",
            email if isinstance(email, str) else "",
        )

    def _field(key: str) -> str:
        if key in request.form:
            return request.form[key]
        return request.args.get(key, "")

    return _field("name"), _field("email")


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/", methods=["GET"])
def index() -> tuple[str, int, dict[str, str]]:
    """Plain-text greeting."""
    return "Hello, World!", 200, {"Content-Type": "text/plain; charset=utf-8"}


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "service": "users",
        "users": len(get_store()),
    }), 200


@api_bp.route("/users/all", methods=["GET"])
def get_all_users() -> tuple[Response, int]:
    """
    List every user.

    Returns:
        JSON object keyed by user ID and 200 status code.
    """
    users = get_store().get_all()
    logger.info("GET /users/all - Found %d users", len(users))
    return jsonify({user_id: user.to_dict() for user_id, user in users.items()}), 200


@api_bp.route("/users/<user_id>", methods=["GET"])
def get_user(user_id: str) -> tuple[Response, int]:
    """
    Get a single user by ID.

    Args:
        user_id: The unique identifier of the user.

    Returns:
        JSON response with user data and 200 status code.
    """
    logger.info("GET /users/%s - Fetching user", user_id)
    user = get_store().get(user_id)
    return jsonify(user.to_dict()), 200


@api_bp.route("/users/name/", defaults={"name": ""}, methods=["GET"])
@api_bp.route("/users/name/<name>", methods=["GET"])
def get_user_by_name(name: str) -> tuple[Response, int]:
    """
    Get a user by exact name.

    If several users share the name, any one of them is returned.
    """
    logger.info("GET /users/name/%s - Fetching user by name", name)
    user = get_store().get_by_name(name)
    return jsonify(user.to_dict()), 200


@api_bp.route("/users", methods=["POST"])
def create_user() -> tuple[Response, int]:
    """
    Create a new user.

    Request Body (form or JSON):
        name: User name (optional, defaults to empty)
        email: User email (optional, defaults to empty)

    Returns:
        JSON response with created user and 201 status code.
    """
    name, email = read_user_fields()
    user = get_store().create(name, email)
    logger.info("POST /users - Created user with ID: %s", user.id)
    return jsonify(user.to_dict()), 201


@api_bp.route("/users/<user_id>", methods=["PUT"])
@api_bp.route("/users/update/<user_id>", methods=["PUT"])
def update_user(user_id: str) -> tuple[Response, int]:
    """
    Replace a user's name and email.

    Both fields are overwritten, so an omitted field blanks the stored
    value.
    """
    logger.info("PUT /users/%s - Updating user", user_id)
    name, email = read_user_fields()
    user = get_store().replace_fields(user_id, name, email)
    return jsonify(user.to_dict()), 200


@api_bp.route("/users/<user_id>", methods=["PATCH"])
@api_bp.route("/users/updateOne/<user_id>", methods=["PATCH"])
def patch_user(user_id: str) -> tuple[Response, int]:
    """Update only the fields supplied with a non-empty value."""
    logger.info("PATCH /users/%s - Patching user", user_id)
    name, email = read_user_fields()
    user = get_store().merge_fields(user_id, name, email)
    return jsonify(user.to_dict()), 200


@api_bp.route("/users/<user_id>", methods=["DELETE"])
@api_bp.route("/users/delete/<user_id>", methods=["DELETE"])
def delete_user(user_id: str) -> tuple[Response, int]:
    """
    Delete a user.

    Args:
        user_id: The unique identifier of the user.

    Returns:
        JSON response with success message and 200 status code.
    """
    logger.info("DELETE /users/%s - Deleting user", user_id)
    get_store().delete(user_id)
    logger.info("Deleted user %s", user_id)
    return jsonify({"message": "User deleted"}), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(UserNotFoundError)
def user_not_found(error: UserNotFoundError) -> tuple[Response, int]:
    """Handle lookups for users that do not exist."""
    logger.warning("User %s not found", error.key)
    return jsonify({"message": "User not found"}), 404


@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"message": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"message": "Method not allowed"}), 405


@api_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return jsonify({"message": "Internal server error"}), 500
