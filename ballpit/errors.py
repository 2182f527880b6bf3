class SimulationError(Exception):
    """Base class for errors raised by the simulation core."""


class ConfigurationError(SimulationError, ValueError):
    """A radius, constant or range was rejected at construction time."""


class CapacityError(SimulationError):
    """The particle collection is bounded and already full."""
