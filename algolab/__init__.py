"""Classic data structures, algorithm exercises and interactive menu programs."""

__version__ = "0.1.0"