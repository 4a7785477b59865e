"""Status bar building blocks for system, media, network and package information."""

__version__ = "0.1.0"