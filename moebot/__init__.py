"""Core logic for a community chat bot: permissions, role groups, veteran points, timers and formatting."""

__version__ = "0.1.0"