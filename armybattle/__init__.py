"""Console battle simulation between two armies of mythical creatures."""

__version__ = "1.0.0"
__all__ = ["helper", "creature", "army", "game", "cli"]