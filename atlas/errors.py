"""
errors.py — Exception hierarchy for Atlas.

The token engine itself never raises for in-range input; these errors come
from the layers around it (theme resolution, output writers, the CLI).
"""

from __future__ import annotations

from typing import Iterable


class AtlasError(Exception):
    """Base class for every error Atlas raises on purpose."""


class ThemeNotFoundError(AtlasError, KeyError):
    """Raised when a theme name is not in the catalog."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Theme '{name}' not found. Available: {', '.join(self.available)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ThemeValidationError(AtlasError, ValueError):
    """A theme record is missing a required field or holds an invalid value."""

    def __init__(self, message: str, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class ThemeFileError(AtlasError):
    """A custom theme file could not be found or parsed."""


class UnsupportedFormatError(AtlasError, ValueError):
    """Raised for an output format the writer layer does not know."""

    def __init__(self, fmt: str, supported: Iterable[str]) -> None:
        self.format = fmt
        self.supported = list(supported)
        super().__init__(
            f"Unsupported format '{fmt}'. Supported: {', '.join(self.supported)}"
        )
