"""Weather and hazard information for arbitrary locations worldwide."""

__version__ = "0.1.0"
