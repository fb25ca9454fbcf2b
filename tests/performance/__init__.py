"""
Performance testing package (Locust-based).

Locust user classes and helper utilities for load testing the user
service. Every request shares one store lock, so these scenarios show
how latency grows with contention.

Run separately from pytest; see ``locustfile.py`` for usage.
"""
