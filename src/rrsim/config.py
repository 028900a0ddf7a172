from dataclasses import dataclass

from .errors import ConfigError

DEFAULT_QUANTUM = 2
DEFAULT_MAX_SEQ_LEN = 20


@dataclass
class SimulationConfig:
    quantum: int = DEFAULT_QUANTUM
    max_seq_len: int = DEFAULT_MAX_SEQ_LEN
    fast_forward: bool = True
    trace_decisions: bool = False
    record_segments: bool = False

    def validate(self) -> "SimulationConfig":
        for name in ("quantum", "max_seq_len"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be > 0, got {value}")
        return self
