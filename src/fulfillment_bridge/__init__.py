"""Shopify <-> FinerWorks fulfillment bridge."""

__version__ = "0.1.0"
