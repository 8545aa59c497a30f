"""Match normalization and role inference for a Dota 2 team dashboard."""

__version__ = "0.1.0"
