# backend/emailql/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import Settings, settings
from .routers import explorer, graphql
from .services.schema import build_schema
from .services.syntax import EmailChecker, get_checker
from .utils.headers import add_cache_headers

logger = logging.getLogger("emailql")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _public_host(host: str) -> str:
    return "localhost" if host in ("0.0.0.0", "::") else host


def create_app(config: Optional[Settings] = None, checker: Optional[EmailChecker] = None) -> FastAPI:
    """
    Build the application once: the schema is created here and kept on
    ``app.state`` for the request handlers, read-only from then on.
    """
    config = config or settings
    checker = checker or get_checker(config.EMAIL_CHECKER)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        base = f"http://{_public_host(config.HOST)}:{config.PORT}"
        logger.info("Server running at %s", base)
        logger.info("Access the GraphQL API at %s/graphql", base)
        logger.info("Access the GraphiQL interface at %s/graphiql", base)
        yield

    app = FastAPI(
        title=config.APP_NAME,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = config
    app.state.schema = build_schema(checker, config.SCHEMA_PATH)

    # ---------------------------------------------------
    # No caching anywhere, static files included
    # ---------------------------------------------------
    app.middleware("http")(add_cache_headers)

    # ---------------------------------------------------
    # Health check
    # ---------------------------------------------------
    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    # ---------------------------------------------------
    # Routers
    # ---------------------------------------------------
    app.include_router(graphql.router, tags=["graphql"])
    app.include_router(explorer.router, tags=["explorer"])

    # Catch-all: must stay last so the routes above win
    app.mount("/", StaticFiles(directory=config.STATIC_DIR), name="static")

    return app


def run() -> None:
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        create_app(),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
