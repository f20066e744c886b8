"""Byte containers, SHA-256 and ed25519 helpers, and authorization context types."""

__version__ = "0.1.0"
__all__ = ["auth", "bytes", "bytesn", "crypto", "errors", "literals"]