"""Command-driven simulations and algorithms: battles, events, graphs, a library desk and polynomials."""

__version__ = "0.1.0"