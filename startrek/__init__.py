"""Star Trek - turn-based tactical space combat simulation."""

__version__ = "1.0.0"
