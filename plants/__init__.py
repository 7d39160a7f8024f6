"""Plants Application Package — single-entity record service over DynamoDB.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
