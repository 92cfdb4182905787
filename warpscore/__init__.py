"""Team scoreboard generation from per-account participation scores."""

__version__ = "1.0.0"
