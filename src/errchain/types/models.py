"""errchain Types - Data Models.

This module defines the key/value pair attached to chain errors.

Annotations are deliberately schema-less: the value is an opaque payload
and the consumer names the type it expects when reading it back
(see errchain.values.get_typed_value).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Annotation:
    """Key/value diagnostic pair attached to a chain error.

    Attributes:
        key: Field name (uniqueness is conventional, not enforced)
        value: Arbitrary payload

    Example:
        >>> ann = Annotation("user_id", 42)
        >>> key, value = ann
    """
    key: str
    value: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def as_tuple(self) -> tuple[str, Any]:
        """Return the pair as a plain (key, value) tuple."""
        return (self.key, self.value)


# Anything accepted where an annotation is expected
AnnotationLike = Union[Annotation, tuple[str, Any]]


def normalize_annotations(
    annotations: Iterable[AnnotationLike],
    fields: Optional[Mapping[str, Any]] = None,
) -> tuple[Annotation, ...]:
    """Build an immutable annotation tuple from mixed inputs.

    Positional entries keep their order; mapping fields follow them in the
    mapping's iteration order.
    """
    result = [
        a if isinstance(a, Annotation) else Annotation(*a)
        for a in annotations
    ]
    if fields:
        result.extend(Annotation(k, v) for k, v in fields.items())
    return tuple(result)
