"""AccessGraph - team-aware permission resolution service."""

__version__ = "0.1.0"
