"""Lead Synthesis Platform API."""

__version__ = "2.0.0"
