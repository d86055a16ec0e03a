"""Application errors.

Remote failures stay as `httpx` exceptions and filesystem failures as
`OSError`; only conditions the tool itself detects live here.
"""

from __future__ import annotations

from typing import Iterable


class Auth0CLIError(Exception):
    """Base class for errors raised by the tool itself."""


class ConfigurationError(Auth0CLIError):
    """Required settings (domain, token) are missing or invalid."""


class NoImportDataError(Auth0CLIError):
    """Aggregation produced zero records; nothing worth writing."""

    def __init__(self, message: str = "no import data available") -> None:
        super().__init__(message)


class UnknownResourceTypeError(Auth0CLIError):
    def __init__(self, unknown: Iterable[str], supported: Iterable[str]) -> None:
        self.unknown = sorted(set(unknown))
        self.supported = list(supported)
        super().__init__(
            f"unsupported resource type(s): {', '.join(self.unknown)} "
            f"(supported: {', '.join(self.supported)})"
        )
