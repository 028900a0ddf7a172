"""Round-Robin CPU scheduling simulator."""

from .config import DEFAULT_MAX_SEQ_LEN, DEFAULT_QUANTUM, SimulationConfig
from .errors import ConfigError, InputError, SimulationError
from .fastforward import FastForwardPlan, ReadySlot, plan_fast_forward
from .models import IDLE, Process, Segment, SimulationResult, make_processes
from .simulator import RoundRobinSimulator, simulate_rr

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_MAX_SEQ_LEN", "DEFAULT_QUANTUM", "SimulationConfig",
    "ConfigError", "InputError", "SimulationError",
    "FastForwardPlan", "ReadySlot", "plan_fast_forward",
    "IDLE", "Process", "Segment", "SimulationResult", "make_processes",
    "RoundRobinSimulator", "simulate_rr",
]
