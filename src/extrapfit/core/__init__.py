"""Core extrapolation logic, independent of I/O and user interface."""
