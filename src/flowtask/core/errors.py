# src/flowtask/core/errors.py

from __future__ import annotations


class FlowTaskError(Exception):
    """Base class for every error raised by FlowTask."""


class NotFoundError(FlowTaskError, LookupError):
    """Raised by update/delete when no stored entity has the given id."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(FlowTaskError, ValueError):
    """Form-level validation failure (services never raise it)."""


class SeedError(FlowTaskError):
    """Seed dataset could not be read or has the wrong shape."""
