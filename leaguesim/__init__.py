"""
League simulation engine: double round-robin scheduling, match simulation,
standings with revertible results, and championship predictions.
"""

__version__ = "0.1.0"
