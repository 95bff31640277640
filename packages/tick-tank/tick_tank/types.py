"""Error types for tick-tank."""


class ConfigError(ValueError):
    """Raised on invalid configuration values or an unreadable sprite asset."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, malformed payload)."""
