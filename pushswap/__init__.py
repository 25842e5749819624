"""Two-stack sorting: a solver that emits operations and a checker that replays them."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "placement", "optimize", "sorting", "legacy", "cli"]