"""Exceptions raised by elastic systems."""


class ConfigurationError(ValueError):
    """Invalid extent or elastic properties (e.g. mass <= 0, snap_radius <= 0)."""
