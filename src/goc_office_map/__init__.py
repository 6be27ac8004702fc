"""Map of federal government office locations from the real-property registry."""

__version__ = "0.1.0"
