from __future__ import annotations
from typing import Optional


class SerializationError(Exception):
    """Base class for errors raised while turning documents into HTML."""


class RenderError(SerializationError):
    def __init__(self, message: str, type_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.type_name = type_name


class UnknownTypeError(RenderError):
    def __init__(self, type_name: Optional[str]) -> None:
        super().__init__(f'Unknown block type "{type_name}"', type_name=type_name)


class SchemaLoadError(SerializationError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load schema from {path}: {reason}")
        self.path = path
        self.reason = reason
