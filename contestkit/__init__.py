"""Union-find structures, number theory helpers and small contest solvers."""

__version__ = "0.1.0"

__all__ = ["counting", "disjoint_sets", "greedy", "grids", "min_stack", "number_theory", "queens"]