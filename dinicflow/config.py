"""Configuration classes for dinicflow components."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Tunables for the Dinic solver loop."""

    # Log a progress line every N augmenting paths within one phase
    progress_interval: int = 10_000

    # Skip expanding nodes beyond the sink's level once the sink is found
    early_exit_bfs: bool = True

    def __post_init__(self) -> None:
        if self.progress_interval <= 0:
            raise ValueError(
                f"progress_interval must be positive, got {self.progress_interval}"
            )


# Global configuration instance
DEFAULT_CONFIG = SolverConfig()
