"""Ripe stablecoin-to-fiat quote widget (simulated rates)."""

__version__ = "0.1.0"
