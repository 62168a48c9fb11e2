"""Version information for rigidpose."""

__version__ = "0.1.0"
