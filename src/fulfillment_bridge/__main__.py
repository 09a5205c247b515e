"""Run the bridge with uvicorn: ``python -m fulfillment_bridge``."""

import uvicorn

from fulfillment_bridge.api.server import create_app
from fulfillment_bridge.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
