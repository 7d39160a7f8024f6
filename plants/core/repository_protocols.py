"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every implementation raises the PlantsError hierarchy, never store exceptions
    - Each method is a single point operation; nothing partially applies

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: cancelling the awaiting task is the call-scoped cancellation
    - StoreProbe kept separate: readiness is a bootstrap concern, not data access
"""

from typing import Protocol

from plants.core.plant import Plant


class PlantRepository(Protocol):
    """Data-access capability set — implemented by the DynamoDB adapter and the in-memory fake."""
    async def create(self, plant: Plant) -> Plant: ...
    async def get(self, name: str) -> Plant: ...
    async def update(self, plant: Plant) -> None: ...
    async def delete(self, name: str) -> Plant: ...


class StoreProbe(Protocol):
    """Readiness contract for the backing store."""
    async def ping(self) -> bool: ...
