"""errchain Types - Shared type definitions.

Package Structure:
    - models.py: Annotation key/value pair and input normalization
    - protocols.py: AnnotatedError capability protocol
    - exceptions.py: Exception classes (ErrChainError and subclasses)

Usage:
    >>> from errchain.types import Annotation, AnnotatedError
    >>> from errchain.types import ErrChainError, InvalidConfigError
"""

# Data models
from .models import (
    Annotation,
    AnnotationLike,
    normalize_annotations,
)

# Protocols
from .protocols import AnnotatedError

# Exceptions
from .exceptions import (
    ErrChainError,
    InvalidConfigError,
)

__all__ = [
    "Annotation",
    "AnnotationLike",
    "normalize_annotations",
    "AnnotatedError",
    "ErrChainError",
    "InvalidConfigError",
]
