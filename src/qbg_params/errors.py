"""
Error types raised while building QBG index parameters.
"""

from typing import Any


class QbgParamsError(Exception):
    """Base class for all parameter errors."""


class InvalidConfigurationError(QbgParamsError, ValueError):
    """An override or creation argument would break a construction invariant."""


class UnrecognizedCodeError(QbgParamsError, ValueError):
    """An integer code does not map to any member of an engine enum."""

    def __init__(self, enum_name: str, code: Any) -> None:
        self.enum_name = enum_name
        self.code = code
        super().__init__(f"Unrecognized {enum_name} code: {code!r}")


class UnsupportedElementTypeError(QbgParamsError, TypeError):
    """The element type is not one of uint8, float32 or float16."""
