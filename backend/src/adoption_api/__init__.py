"""Multi-tenant backend for an animal adoption platform."""

__version__ = "0.1.0"
