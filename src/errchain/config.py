"""errchain Configuration.

This module defines the TraversalConfig class and preset configurations
used when walking error chains.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Union

import yaml

from errchain.types import InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraversalConfig:
    """Settings for walking the caused-by links of an error.

    Attributes:
        follow_context: Follow implicit ``__context__`` links when no
            explicit ``__cause__`` is set (and the context is not
            suppressed). Disable to walk ``raise ... from`` links only.
        max_depth: Maximum number of errors visited in one walk.
            Chains built by this library are always finite; the bound
            covers foreign exceptions re-linked by hand.

    Example:
        >>> config = TraversalConfig(follow_context=False)
        >>> collect_annotations(err, config=config)

        >>> config = TraversalConfig.from_yaml("errchain.yaml")
    """
    follow_context: bool = True
    max_depth: int = 1000

    def __post_init__(self) -> None:
        if not isinstance(self.follow_context, bool):
            raise InvalidConfigError(
                f"expected bool, got {type(self.follow_context).__name__}",
                field="follow_context",
            )
        # bool is an int subclass; reject it explicitly
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise InvalidConfigError(
                f"expected int, got {type(self.max_depth).__name__}",
                field="max_depth",
            )
        if self.max_depth < 1:
            raise InvalidConfigError(
                f"must be at least 1, got {self.max_depth}",
                field="max_depth",
            )

    def with_overrides(self, **changes: Any) -> TraversalConfig:
        """Return a copy with the given fields replaced (re-validated)."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "follow_context": self.follow_context,
            "max_depth": self.max_depth,
        }

    @classmethod
    def from_dict(cls, data: dict) -> TraversalConfig:
        """Create from dictionary. Unknown keys are ignored."""
        return cls(
            follow_context=data.get("follow_context", True),
            max_depth=data.get("max_depth", 1000),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> TraversalConfig:
        """Load configuration from a YAML file.

        An empty file yields the defaults.

        Raises:
            InvalidConfigError: If the document is not a mapping or a
                value is invalid
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigError(
                f"{path} must contain a mapping, got {type(data).__name__}"
            )

        config = cls.from_dict(data)
        logger.debug("Loaded traversal config from %s: %s", path, config)
        return config


# =============================================================================
# Preset Configurations
# =============================================================================

DEFAULT_CONFIG = TraversalConfig()
"""Follows explicit causes and implicit contexts, like traceback does."""

CAUSE_ONLY_CONFIG = TraversalConfig(follow_context=False)
"""Follows explicit ``raise ... from`` / wrap links only."""
