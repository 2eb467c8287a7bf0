"""Plain-text register of students and their marks, with a command-line front end."""

__version__ = "1.0.0"
__all__ = ["records", "cli"]