"""errchain Types - Exception Classes.

Exceptions raised by the library itself. Annotated chain errors are
ordinary errors built by callers (errchain.error.ChainError) and do not
inherit from these.

Usage:
    try:
        config = TraversalConfig.from_yaml("errchain.yaml")
    except ErrChainError as e:
        print(f"errchain error: {e}")
"""

from __future__ import annotations


class ErrChainError(Exception):
    """Base exception for all errors raised by errchain itself."""
    pass


class InvalidConfigError(ErrChainError):
    """Raised when traversal configuration is invalid."""

    def __init__(self, message: str, field: str = ""):
        self.field = field
        msg = f"Invalid configuration: {message}"
        if field:
            msg += f" (field: {field})"
        super().__init__(msg)
