"""Error chain builder.

Builds annotated errors and wraps existing errors into chains:

    >>> base = create_error("connection refused", make_annotation("port", 5432))
    >>> err = wrap_error(base, "load user", ("user_id", 42))
    >>> str(err)
    'load user: connection refused'

Wrapping links the new node to its cause through the standard exception
chaining attributes (``__cause__``), so tracebacks and generic tooling
see the same chain that errchain.values walks.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from errchain.types import Annotation, AnnotationLike, normalize_annotations


class ChainError(Exception):
    """Error carrying a message, an optional cause and its own annotations.

    Instances are immutable once constructed: the rendered text, the
    cause and the annotation tuple are fixed at creation. Use
    create_error() and wrap_error() rather than the constructor.

    Attributes:
        message: Text supplied at construction (without the cause's text)
        cause: Wrapped error, or None for a leaf
        annotations: This node's own annotations, in insertion order
        text: Rendered text, ``message`` or ``"<message>: <cause text>"``
    """

    def __init__(
        self,
        message: str,
        annotations: Iterable[AnnotationLike] = (),
        cause: Optional[BaseException] = None,
    ):
        self._message = message
        self._annotations = normalize_annotations(annotations)
        self._cause = cause
        self._text = message if cause is None else f"{message}: {cause}"
        super().__init__(self._text)

        # Leaves expose no underlying error, even when raised inside an
        # except block.
        self.__cause__ = cause
        self.__suppress_context__ = True

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return self._annotations

    @property
    def text(self) -> str:
        return self._text

    def get_annotations(self) -> tuple[Annotation, ...]:
        """Return this node's annotations (AnnotatedError protocol)."""
        return self._annotations

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        parts = [repr(self._message)]
        if self._annotations:
            parts.append(
                "annotations=["
                + ", ".join(f"{a.key}={a.value!r}" for a in self._annotations)
                + "]"
            )
        if self._cause is not None:
            parts.append(f"cause={self._cause!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


def make_annotation(key: str, value: Any) -> Annotation:
    """Create a key/value pair for attaching to errors.

    No validation is performed on the key or the value.
    """
    return Annotation(key, value)


def create_error(
    message: str,
    *annotations: AnnotationLike,
    fields: Optional[Mapping[str, Any]] = None,
) -> ChainError:
    """Create a leaf error with the given text and optional annotations.

    Args:
        message: Error text, rendered verbatim
        *annotations: Annotation objects or (key, value) tuples
        fields: Extra annotations given as a mapping, appended after
            the positional ones

    Returns:
        New ChainError without a cause

    Example:
        >>> err = create_error("invalid input", make_annotation("field", "email"))
        >>> err = create_error("invalid input", fields={"field": "email"})
    """
    return ChainError(message, normalize_annotations(annotations, fields))


def wrap_error(
    cause: Optional[BaseException],
    message: str,
    *annotations: AnnotationLike,
    fields: Optional[Mapping[str, Any]] = None,
) -> Optional[ChainError]:
    """Wrap an existing error with additional text and annotations.

    The new node keeps only the annotations passed here; the cause's
    annotations stay on the cause and are reached by walking the chain.

    Args:
        cause: Error to wrap. None is passed through unchanged.
        message: Text prepended to the cause's text
        *annotations: Annotation objects or (key, value) tuples
        fields: Extra annotations given as a mapping

    Returns:
        New ChainError, or None if ``cause`` is None

    Example:
        >>> err = wrap_error(maybe_failed(), "sync orders", ("batch", 7))
        >>> if err is not None:
        ...     raise err
    """
    if cause is None:
        return None

    return ChainError(message, normalize_annotations(annotations, fields), cause)
