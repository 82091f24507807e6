from __future__ import annotations


class SchemaSyntaxError(ValueError):
    """Raised when schema text cannot be turned into a set of entities."""


class DuplicateEntityError(SchemaSyntaxError):
    """Raised when two `@model` types share the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Duplicate @model type "{name}"')
        self.name = name
