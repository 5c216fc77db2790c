"""Exceptions raised by the renderer."""


class RaycastError(Exception):
    """Base class for renderer errors."""


class ConfigurationError(RaycastError, ValueError):
    """Raised when a scene or render configuration cannot be rendered."""
