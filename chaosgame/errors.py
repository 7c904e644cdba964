"""Exceptions raised during setup. Steady-state simulation never raises."""


class ChaosGameError(Exception):
    """Base class for chaosgame setup failures."""


class ConfigError(ChaosGameError, ValueError):
    """Configuration file is malformed or holds unusable values."""


class SurfaceNotFoundError(ChaosGameError, LookupError):
    """No drawing surface is registered under the requested name."""


class SurfaceUnsupportedError(ChaosGameError, TypeError):
    """The registered object cannot be drawn on in 2D."""
