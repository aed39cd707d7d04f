"""Chain traversal and annotation extraction.

Works on any exception, not only ones built by errchain.error. A
ChainError leads to the cause it was built with. Any other error follows
Python's exception chaining protocol: the explicit ``__cause__`` when
set, otherwise the implicit ``__context__`` unless it is suppressed (the
rule traceback uses). Errors that do not implement AnnotatedError
contribute no annotations, but the walk continues through them; foreign
annotation data that cannot be read is skipped.

Precedence:
    When a key appears at several levels, the outermost (most recently
    wrapped) value wins, both in flatten_to_map() and get_typed_value().

None of the functions here raise on missing data; absence is reported
through empty results or the ``found`` flag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Optional, TypeVar, Union

from errchain.config import DEFAULT_CONFIG, TraversalConfig
from errchain.error import ChainError
from errchain.types import AnnotatedError, Annotation

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()

_ZERO_VALUES: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
}


def zero_value(typ: Any) -> Any:
    """Return the empty value reported for a failed lookup of ``typ``.

    Scalars map to their falsy value (0, "", False, ...); every other
    type maps to None.
    """
    if isinstance(typ, type):
        return _ZERO_VALUES.get(typ)
    return None


def _underlying(err: BaseException, config: TraversalConfig) -> Optional[BaseException]:
    # __cause__ can be rewritten by raise-from or lost by pickling;
    # chain nodes keep the cause they were built with.
    if isinstance(err, ChainError):
        return err.cause

    cause = getattr(err, "__cause__", None)
    if cause is not None:
        return cause
    if config.follow_context and not getattr(err, "__suppress_context__", False):
        return getattr(err, "__context__", None)
    return None


def iter_chain(
    err: Optional[BaseException],
    config: Optional[TraversalConfig] = None,
) -> Iterator[BaseException]:
    """Yield ``err`` and each underlying error, outermost first.

    The walk ends at an error exposing no underlying error, at an error
    already visited, or after ``config.max_depth`` errors.
    """
    config = config or DEFAULT_CONFIG
    seen: set[int] = set()
    current = err

    while current is not None:
        if id(current) in seen:
            logger.debug("Cycle in error chain at %r, stopping", current)
            return
        if len(seen) >= config.max_depth:
            logger.debug("Error chain exceeds max_depth=%d, stopping", config.max_depth)
            return

        seen.add(id(current))
        yield current
        current = _underlying(current, config)


def collect_annotations(
    err: Optional[BaseException],
    config: Optional[TraversalConfig] = None,
) -> list[Annotation]:
    """Collect annotations from an error and everything it wraps.

    Returns:
        Annotations ordered outer node first, each node's own annotations
        in insertion order. Empty for None or unannotated chains.

    Example:
        >>> base = create_error("b", ("x", 1))
        >>> top = wrap_error(base, "t", ("z", 3))
        >>> [a.key for a in collect_annotations(top)]
        ['z', 'x']
    """
    result: list[Annotation] = []

    for node in iter_chain(err, config):
        if isinstance(node, ChainError):
            result.extend(node.annotations)
        elif isinstance(node, AnnotatedError):
            result.extend(_foreign_annotations(node))

    return result


def _foreign_annotations(node: BaseException) -> list[Annotation]:
    """Read annotations from a foreign AnnotatedError, skipping bad data.

    Accepts a mapping or an iterable of Annotation / (key, value) pairs.
    """
    try:
        raw = node.get_annotations()
        if isinstance(raw, Mapping):
            raw = list(raw.items())
        entries = list(raw)
    except Exception as e:
        logger.debug("get_annotations() failed on %r, skipping: %s", node, e)
        return []

    result: list[Annotation] = []
    for entry in entries:
        if isinstance(entry, Annotation):
            result.append(entry)
        elif isinstance(entry, (tuple, list)) and len(entry) == 2:
            result.append(Annotation(entry[0], entry[1]))
        else:
            logger.debug("Skipping malformed annotation %r from %r", entry, node)
    return result


def flatten_to_map(
    err: Optional[BaseException],
    config: Optional[TraversalConfig] = None,
) -> dict[str, Any]:
    """Collect annotations from the chain into a dict.

    When several errors carry the same key, the value from the outermost
    error is used.
    """
    # inner-first, so outer values are written last
    return {a.key: a.value for a in reversed(collect_annotations(err, config))}


def _matches(value: Any, typ: Any) -> bool:
    if typ is Any or typ is object:
        return True

    types = typ if isinstance(typ, tuple) else (typ,)
    if isinstance(value, bool):
        # True is an int in Python, but not a valid int annotation
        types = tuple(t for t in types if t is not int)

    try:
        return isinstance(value, types)
    except TypeError:
        logger.debug("Unsupported type for annotation lookup: %r", typ)
        return False


def get_typed_value(
    err: Optional[BaseException],
    key: str,
    typ: Union[type[T], tuple[type, ...], Any],
    default: Any = _MISSING,
    config: Optional[TraversalConfig] = None,
) -> tuple[Optional[T], bool]:
    """Retrieve a typed annotation value for a key from the error chain.

    Scans annotations outermost first and returns the first one whose key
    matches and whose value is an instance of ``typ``. A same-key
    annotation of the wrong type is skipped, not treated as a miss, so a
    deeper annotation may still satisfy the lookup.

    Args:
        err: Error to inspect (None is allowed)
        key: Annotation key
        typ: Expected type, tuple of types, or typing.Any
        default: Value returned when nothing matches
            (defaults to zero_value(typ))
        config: Traversal settings

    Returns:
        (value, True) on a match, otherwise (default, False)

    Example:
        >>> user_id, ok = get_typed_value(err, "user_id", int)
        >>> if ok:
        ...     print(user_id)
    """
    for ann in collect_annotations(err, config):
        if ann.key == key and _matches(ann.value, typ):
            return ann.value, True

    if default is _MISSING:
        default = zero_value(typ)
    return default, False
