"""Agent-based epidemic spread simulation on a bounded plane."""

__version__ = "0.1.0"
