from contextlib import asynccontextmanager

from fastapi import FastAPI

from dex_trader import __version__
from dex_trader.api.routes import router
from dex_trader.config import Settings, configure_logging
from dex_trader.tools.toolkit import TraderToolkit


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Keep a toolkit injected before startup (tests, embedding apps)
    if getattr(app.state, "toolkit", None) is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        app.state.toolkit = TraderToolkit.from_settings(settings)

    yield


app = FastAPI(
    title="dex-trader",
    description="HTTP surface for the Jupiter trading tools",
    version=__version__,
    lifespan=lifespan,
)

# Register routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok"}
