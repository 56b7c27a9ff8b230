"""VAMOS: random audio/video mix API over a catalog of media sources."""

__version__ = "0.1.0"
