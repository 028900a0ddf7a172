"""Exception types raised by the simulator, the readers and the outer surfaces."""

from typing import Optional


class SimulationError(Exception):
    pass


class ConfigError(SimulationError, ValueError):
    """Rejected simulator configuration (quantum or sequence cap)."""


class InputError(SimulationError, ValueError):
    """A process record that cannot be simulated.

    ``line_no`` is the 1-based source line when the record came from a reader.
    """

    def __init__(self, reason: str, line_no: Optional[int] = None):
        self.reason = reason
        self.line_no = line_no
        if line_no is None:
            super().__init__(reason)
        else:
            super().__init__(f"Error on line {line_no}: {reason}")
