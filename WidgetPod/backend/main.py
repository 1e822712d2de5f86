#-------------------------FastAPI app--------------------------------

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from endpoints.widgets import widgets_router
from settings import Settings
from store import WidgetStore

logger = logging.getLogger("uvicorn.error")


def create_app(settings=None, store=None):
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Widget store ready (%d widgets).", len(app.state.store))
        yield
        # nothing is persisted, the store dies with the process
        logger.info("Shutting down, dropping %d widgets.", len(app.state.store))

    app = FastAPI(title="WidgetPod API", lifespan=lifespan)
    app.state.settings = settings
    # one store per app, tests build their own app instead of resetting a global
    app.state.store = store if store is not None else WidgetStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # routers
    app.include_router(widgets_router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()
