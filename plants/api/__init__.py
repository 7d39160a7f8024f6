"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes delegate to the repository; status codes come only from error_handlers.py
"""
