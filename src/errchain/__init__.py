"""Structured error annotations with chain-aware extraction.

Errors built with errchain carry a human-readable message plus ordered
key/value annotations. Wrapping an error links it as the cause of a new
one; annotations stay on the node they were attached to and are gathered
later by walking the chain.

Building Errors:
    >>> from errchain import create_error, wrap_error, make_annotation
    >>> base = create_error("disk full", make_annotation("free_bytes", 0))
    >>> err = wrap_error(base, "save report", ("report_id", "r-17"))
    >>> str(err)
    'save report: disk full'

    wrap_error(None, ...) returns None, so unconditional wrapping is safe:
    >>> err = wrap_error(maybe_failed(), "sync")

Reading Annotations:
    >>> from errchain import collect_annotations, flatten_to_map, get_typed_value
    >>> flatten_to_map(err)
    {'free_bytes': 0, 'report_id': 'r-17'}
    >>> get_typed_value(err, "report_id", str)
    ('r-17', True)

Foreign Exceptions:
    Any exception linked through ``raise ... from`` (or implicit context)
    is walked through; it simply contributes no annotations.

Configuration:
    >>> from errchain import TraversalConfig, CAUSE_ONLY_CONFIG
    >>> flatten_to_map(err, config=CAUSE_ONLY_CONFIG)
"""

__version__ = "0.1.0"

# Types
from errchain.types import (
    AnnotatedError,
    Annotation,
    AnnotationLike,
    # Exceptions
    ErrChainError,
    InvalidConfigError,
)

# Configuration
from errchain.config import (
    CAUSE_ONLY_CONFIG,
    DEFAULT_CONFIG,
    TraversalConfig,
)

# Chain builder
from errchain.error import (
    ChainError,
    create_error,
    make_annotation,
    wrap_error,
)

# Traversal / extraction
from errchain.values import (
    collect_annotations,
    flatten_to_map,
    get_typed_value,
    iter_chain,
    zero_value,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "AnnotatedError",
    "Annotation",
    "AnnotationLike",
    "ErrChainError",
    "InvalidConfigError",
    # Configuration
    "CAUSE_ONLY_CONFIG",
    "DEFAULT_CONFIG",
    "TraversalConfig",
    # Chain builder
    "ChainError",
    "create_error",
    "make_annotation",
    "wrap_error",
    # Traversal / extraction
    "collect_annotations",
    "flatten_to_map",
    "get_typed_value",
    "iter_chain",
    "zero_value",
]
