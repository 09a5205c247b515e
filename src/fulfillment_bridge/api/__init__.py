"""HTTP API for the fulfillment bridge."""

from fulfillment_bridge.api.server import create_app

__all__ = ["create_app"]
