"""FinerWorks integration: client and order mapping."""

from fulfillment_bridge.integrations.finerworks.client import FinerWorksClient

__all__ = ["FinerWorksClient"]
