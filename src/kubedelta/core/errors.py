"""Exception classes for KubeDelta.

Raised only when a strict policy is requested; the lenient defaults log a
warning and recover instead.
"""

from typing import Optional


class KubeDeltaError(Exception):
    """Base exception for all KubeDelta errors."""


class MalformedDocumentError(KubeDeltaError):
    """A document has no usable (kind, metadata.name) identity."""

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position
        location = f"document #{position}: " if position is not None else ""
        super().__init__(f"{location}{reason}")


class KeyCollisionError(KubeDeltaError):
    """Two documents of one input share the same DocumentKey."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Duplicate object '{key}' in the same input")


class DecodeError(KubeDeltaError):
    """The YAML stream could not be decoded to the end."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.message = message
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class ConfigError(KubeDeltaError):
    """The configuration file is unreadable or carries unknown settings."""
