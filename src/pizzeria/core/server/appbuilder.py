from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from pizzeria.core.config import Config, load_config
from pizzeria.core.context import Context, context
from pizzeria.core.exceptions import setup_exception_handlers
from pizzeria.core.ioc import AppContainer, container
from pizzeria.core.telemetry import configure_structlog
from .custom_fastapi import CustomFastApi
from .features import get_feature_routers

logger = structlog.get_logger(__name__)


def health(request: Request) -> PlainTextResponse:
    return PlainTextResponse("OK")


@asynccontextmanager
async def _lifespan(app: CustomFastApi):
    await app.container.start()
    logger.info("resources_started")
    try:
        yield
    finally:
        await app.container.stop()
        logger.info("resources_stopped")


class AppBuilder:
    """
    Builds and runs the FastAPI application in a fluent way:

        AppBuilder().build().run()
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        context: Context = context,
        container: AppContainer = container,
    ):
        self._config = config or load_config()
        self._context = context
        self._container = container
        self._app: Optional[CustomFastApi] = None

    def _setup_health(self, app: CustomFastApi):
        app.router.routes.append(
            Route(
                path="/health",
                endpoint=health,
                methods=["GET", "HEAD"],
                name="health",
            )
        )

    def build(self) -> "AppBuilder":
        env = self._config.env
        configure_structlog(self._config.name, self._config.version, env.log_level)

        openapi = self._config.openapi
        self._app = CustomFastApi(
            config=self._config,
            context=self._context,
            container=self._container,
            title=openapi.title,
            version=openapi.version,
            summary=openapi.summary,
            description=openapi.description or "",
            openapi_url="/openapi.json" if env.openapi else None,
            lifespan=_lifespan,
        )

        routers = get_feature_routers(self._config.features)
        for router in routers:
            self._app.include_router(router)

        modules = self._context.modules
        self._container.wire(modules)

        setup_exception_handlers(self._app)
        self._setup_health(self._app)

        logger.info("app_built", routers=len(routers), modules=len(modules))
        return self

    def run(self, port: int = 8080) -> None:
        if self._app is None:
            self.build()

        host = "127.0.0.1"
        final_port = self._config.port or port
        logger.info("server_starting", url=f"http://{host}:{final_port}")
        uvicorn.run(self._app, host=host, port=final_port, log_config=None)

    @property
    def app(self) -> CustomFastApi:
        if self._app is None:
            self.build()
        return self._app
