"""Order aggregate core: invariants and lifecycle rules for food orders."""

__version__ = "0.1.0"
