"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, variable: str, reason: str) -> None:
        super().__init__(f"Invalid configuration for {variable}: {reason}")
        self.variable = variable
        self.reason = reason
