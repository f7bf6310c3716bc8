"""Monte Carlo simulations of a walker on a fluctuating one-dimensional surface."""

__version__ = "0.1.0"
__all__ = ["lattice", "profile", "returnstat", "roughness"]