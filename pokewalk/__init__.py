"""A tile-based collect-and-escape puzzle game played on .ber maps."""

__version__ = "0.1.0"