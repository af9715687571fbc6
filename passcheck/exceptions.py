"""
passcheck/exceptions.py
=======================
Exception hierarchy for passcheck.

PasscheckError
├── ConfigurationError   (also a ValueError)
└── ClipboardError
"""


class PasscheckError(Exception):
    """Base exception for all passcheck errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "NO_CHARACTER_CLASS"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


class ConfigurationError(PasscheckError, ValueError):
    """Raised when a generator policy or a stored setting is invalid."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class ClipboardError(PasscheckError):
    """Raised when the system clipboard cannot be written."""
