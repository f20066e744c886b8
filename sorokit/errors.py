"""Errors raised by the byte containers."""

from __future__ import annotations


class ConversionError(ValueError):
    """A value could not be converted to the requested type."""


class HostError(Exception):
    """A failure reported the way the host environment reports it."""

    def __init__(self, error_type: str, code: str) -> None:
        self.error_type = error_type
        self.code = code
        super().__init__(error_type, code)

    def __str__(self) -> str:
        return f"HostError: Error({self.error_type}, {self.code})"