"""
Test suite for the User service.

This package contains:
- unit/: UserStore and User model tests
- integration/: API tests through the Flask test client
- contracts/: response payloads checked against the OpenAPI contract
- smoke/: requests against a live threaded server
- performance/: Locust load scenarios (run separately)
"""
