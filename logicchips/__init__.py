"""Truth tables of common 4000- and 7400-series logic ICs: gates, chips and a command line."""

__version__ = "0.1.0"
__all__ = ["gates", "chips", "cli"]