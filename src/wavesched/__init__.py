"""wavesched -- budget-constrained spawn scheduling for wave-based simulations."""

__version__ = "0.1.0"
