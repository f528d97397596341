"""cannablend: heuristic experience prediction for weighted strain blends."""

__version__ = "0.1.0"
