"""Two-stack integer sorting with a fixed move set, a checker for move lists, and small text and buffer helpers."""

__version__ = "1.0.0"