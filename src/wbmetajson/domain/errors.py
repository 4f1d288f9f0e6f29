from __future__ import annotations

"""
Domain Error Types.

Separates configuration-shape failures (raised before any tree work) from
failures of a generation run against a concrete build output.
"""


class ConfigurationError(ValueError):
    """Raised when the generator options do not match the expected schema."""


class GenerationError(RuntimeError):
    """Raised when a generation run fails and the build must be aborted."""
