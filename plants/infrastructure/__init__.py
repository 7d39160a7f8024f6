"""Infrastructure Layer — store adapters, client construction and logging setup.

Invariants:
    - Every store failure is mapped to the core/errors.py hierarchy before leaving this layer
"""
