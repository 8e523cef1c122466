"""Exception hierarchy shared across the package."""

from __future__ import annotations

__all__ = [
    "VibeVJError",
    "RenderError",
    "AudioError",
    "SceneError",
    "ScriptingError",
    "SerializationError",
    "ResourceNotFound",
    "InvalidOperation",
]


class VibeVJError(Exception):
    """Base class for all package errors."""

    prefix = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class RenderError(VibeVJError):
    prefix = "Render error"


class AudioError(VibeVJError):
    prefix = "Audio error"


class SceneError(VibeVJError):
    prefix = "Scene error"


class ScriptingError(VibeVJError):
    prefix = "Scripting error"


class SerializationError(VibeVJError):
    prefix = "Serialization error"


class ResourceNotFound(VibeVJError):
    prefix = "Resource not found"


class InvalidOperation(VibeVJError):
    prefix = "Invalid operation"