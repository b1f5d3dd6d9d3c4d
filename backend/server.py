"""uvicorn server that announces itself once the listening socket is bound."""

import logging

import uvicorn

from backend.config import Settings
from backend.main import create_app

logger = logging.getLogger(__name__)


class Server(uvicorn.Server):
    def __init__(self, config: uvicorn.Config, settings: Settings):
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets=None):
        # A failed bind exits inside super().startup(), before started is set
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server running at {self.settings.public_url}")


def serve(settings: Settings):
    """Run the app until it is stopped. Exits nonzero if startup fails."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    server = Server(config, settings)
    server.run()
    if not server.started:
        raise SystemExit(1)
