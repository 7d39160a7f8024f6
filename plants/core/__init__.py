"""Core Layer — entity, error taxonomy, codec and protocols. No IO, no clients.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Codec and invariant checks are pure and deterministic
"""
