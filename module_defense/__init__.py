"""Module Defense: real-time tower-defense simulation core."""

__version__ = "1.0.0"
