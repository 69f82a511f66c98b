"""ContextVar-based clock configuration for clockface.

Layout parameters of the clock (face radius, label font size, label text,
default output path) live in an immutable ClockConfig. The active config is
held in a ContextVar, so the command line can set it once and the layout
code reads it without threading it through every call.

The document-tree core (nodes, attributes, renderer) never reads config;
only the clock layout and the command line do.

Usage:
    from clockface.config import ClockConfig, config_context

    with config_context(ClockConfig(radius=100.0)):
        svg = render_clock(ClockTime(10, 10, 30))

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from clockface.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """Immutable clock layout configuration.

    Attributes:
        radius: Face radius in user units; the document is 2*radius square
        font_size: Label font size
        label: Text drawn near 12 o'clock
        output: Default output path for the command line

    """

    radius: float = 210.0
    font_size: float = 26.0
    label: str = "XXIV"
    output: str = "ora.svg"

    @classmethod
    def from_dict(cls, config_dict: dict) -> ClockConfig:
        """Create ClockConfig from a dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> ClockConfig.from_dict({"radius": 100.0, "colour": "red"}).radius
            100.0

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def validate(self) -> ClockConfig:
        """Check the values are usable.

        Returns:
            self, for chaining

        Raises:
            ConfigError: If radius or font size is not positive
        """
        if self.radius <= 0:
            raise ConfigError("radius", f"must be positive, got {self.radius}")
        if self.font_size <= 0:
            raise ConfigError("font_size", f"must be positive, got {self.font_size}")
        return self


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ClockConfig = ClockConfig()

_clock_config: ContextVar[ClockConfig] = ContextVar(
    "clock_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> ClockConfig:
    """Get the active clock configuration."""
    return _clock_config.get()


def set_config(config: ClockConfig) -> None:
    """Set the clock configuration for the current context."""
    _clock_config.set(config)


def reset_config() -> None:
    """Reset to the default configuration."""
    _clock_config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: ClockConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.
    """
    previous = _clock_config.get()
    _clock_config.set(config)
    try:
        yield
    finally:
        _clock_config.set(previous)


__all__ = [
    "ClockConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
