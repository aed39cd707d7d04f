"""Capability protocols for error chain traversal.

Traversal never assumes a concrete node type. At each step it asks
whether the current error exposes annotations; foreign exception classes
can opt in by implementing ``get_annotations``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .models import Annotation


@runtime_checkable
class AnnotatedError(Protocol):
    """Protocol for errors that carry their own annotations.

    Implementations must return only the node's own annotations, in
    insertion order. Annotations of wrapped causes are discovered by the
    traversal, not by the node.
    """

    def get_annotations(self) -> Sequence[Annotation]:
        """Return this node's annotations."""
        ...
