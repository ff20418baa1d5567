import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, load_settings
from app.database import create_db_engine
from app.middleware import JSONBodyMiddleware
from app.routes import products_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.db_engine = create_db_engine(app.state.settings.database_url)
    try:
        yield
    finally:
        if app.state.db_engine is not None:
            app.state.db_engine.dispose()
        logger.info("Server shut down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application from settings loaded once at startup.
    Also usable as a factory: uvicorn --factory app.main:create_app
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Record Shop API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_engine = None

    # Middleware added last runs first: CORS, then JSON body parsing
    app.add_middleware(JSONBodyMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(products_router)

    return app


class ShopServer(uvicorn.Server):
    """uvicorn server that reports the port once its sockets are bound."""

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running on port %s", self.bound_port())

    def bound_port(self) -> int:
        for server in self.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


def run(settings: Optional[Settings] = None):
    """Configure logging and serve the app on all interfaces."""
    if settings is None:
        settings = load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = uvicorn.Config(create_app(settings), host=settings.host, port=settings.port)
    ShopServer(config).run()


if __name__ == "__main__":
    run()
