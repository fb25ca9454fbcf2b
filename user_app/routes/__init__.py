"""
Routes package for the User service.

This package contains route blueprints:
- api: JSON endpoints for user CRUD plus the root greeting
"""
