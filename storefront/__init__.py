"""Storefront catalog navigator service."""

__version__ = "0.1.0"
