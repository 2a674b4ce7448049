"""Configuration classes for impcut components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Configuration for the important-cut branching search."""

    # Number of worker processes; 1 keeps the search in-process
    parallelism: int = 1

    # Open subtrees to prepare per worker before dispatching
    split_factor: int = 4

    # Largest graph the brute-force reference will accept
    brute_force_max_nodes: int = 16

    def __post_init__(self) -> None:
        if self.parallelism < 1:
            raise ValueError("parallelism must be >= 1")
        if self.split_factor < 1:
            raise ValueError("split_factor must be >= 1")

    @property
    def frontier_width(self) -> int:
        """Number of independent subtrees to open before going parallel."""
        return self.parallelism * self.split_factor

    def workers_for(self, n_subtrees: int) -> int:
        """Clamp the worker count to the number of subtrees available."""
        return max(1, min(self.parallelism, n_subtrees))


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
