"""Minimal HTTP fixture app serving a greeting and a health check."""

__version__ = "0.1.0"
