"""Sliding-window statistics, a pose vector, ternary search and angle
bookkeeping for aiming at spinning multi-plate targets."""

__version__ = "1.0.0"