"""ContextVar-based segment configuration for latexspans.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per context and read by every Segmenter created in it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    from latexspans import segment, SegmentConfig

    spans = segment(source, config=SegmentConfig(styles_enabled=False))

    # Context config (advanced)
    from latexspans.config import set_segment_config, reset_segment_config

    set_segment_config(SegmentConfig(equations_enabled=False))
    try:
        spans = segment(source)
    finally:
        reset_segment_config()

    # Or use the context manager
    with segment_config_context(SegmentConfig(escape_style_markers=False)):
        spans = segment(source)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any

from latexspans.errors import ConfigError
from latexspans.rules import EQUATION_RULES, STYLE_RULES, DelimiterRule


@dataclass(frozen=True, slots=True)
class SegmentConfig:
    """Immutable segment configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        styles_enabled: Recognize #bold{}, #italic{} and #underline{}
        equations_enabled: Recognize the five equation delimiter pairs
        escape_style_markers: Apply backslash escaping to style markers too
            (equation markers are always escapable)
        source_file: Optional label copied into every span location

    """

    styles_enabled: bool = True
    equations_enabled: bool = True
    escape_style_markers: bool = True
    source_file: str | None = None

    def rules(self) -> tuple[DelimiterRule, ...]:
        """Return the active delimiter rules in priority order."""
        active: list[DelimiterRule] = []
        if self.styles_enabled:
            if self.escape_style_markers:
                active.extend(STYLE_RULES)
            else:
                active.extend(replace(rule, escapable=False) for rule in STYLE_RULES)
        if self.equations_enabled:
            active.extend(EQUATION_RULES)
        return tuple(active)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "SegmentConfig":
        """Create SegmentConfig from a mapping.

        Only includes keys that are valid SegmentConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Mapping with config values. Keys should match
                SegmentConfig attribute names.

        Returns:
            New SegmentConfig instance with values from the mapping.

        Raises:
            ConfigError: If a flag is not a bool or source_file is not a str.

        Example:
            >>> config = SegmentConfig.from_dict({
            ...     "styles_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.styles_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key, value in filtered.items():
            if key == "source_file":
                if value is not None and not isinstance(value, str):
                    raise ConfigError(f"source_file must be a string, got {type(value).__name__}")
            elif not isinstance(value, bool):
                raise ConfigError(f"{key} must be a bool, got {type(value).__name__}")
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: SegmentConfig = SegmentConfig()

# Thread-local configuration via ContextVar
_segment_config: ContextVar[SegmentConfig] = ContextVar(
    "segment_config",
    default=_DEFAULT_CONFIG,
)


def get_segment_config() -> SegmentConfig:
    """Get current segment configuration (thread-local).

    Returns:
        The active SegmentConfig for this thread/context.

    """
    return _segment_config.get()


def set_segment_config(config: SegmentConfig) -> None:
    """Set segment configuration for current context.

    Args:
        config: SegmentConfig instance to use for this context.

    """
    _segment_config.set(config)


def reset_segment_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _segment_config.set(_DEFAULT_CONFIG)


@contextmanager
def segment_config_context(config: SegmentConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: SegmentConfig to use within the context.

    Yields:
        None

    Example:
        >>> with segment_config_context(SegmentConfig(styles_enabled=False)):
        ...     spans = segment("#bold{x}")
        ...     # one TEXT span here
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _segment_config.get()
    _segment_config.set(config)
    try:
        yield
    finally:
        _segment_config.set(previous)


__all__ = [
    "SegmentConfig",
    "get_segment_config",
    "reset_segment_config",
    "segment_config_context",
    "set_segment_config",
]
