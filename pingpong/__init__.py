"""In-memory ping pong match tracker with Elo rankings."""

__version__ = "0.1.0"
