import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from articles import router as articles_router
from comments import router as comments_router
from core import config, error_handlers
from core.db import Database
from topics import router as topics_router
from users import router as users_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to repositories through Depends(get_database).
    app.state.database = await Database.connect()
    try:
        yield
    finally:
        await app.state.database.close()
        app.state.database = None


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

error_handlers.register(app)

app.include_router(topics_router.router, tags=["topics"])
app.include_router(articles_router.router, tags=["articles"])
app.include_router(comments_router.router, tags=["comments"])
app.include_router(users_router.router, tags=["users"])


def endpoint_catalog(application: FastAPI) -> dict[str, dict]:
    catalog: dict[str, dict] = {}
    for route in application.routes:
        if not isinstance(route, APIRoute) or not route.path.startswith("/api"):
            continue
        for method in sorted(route.methods - {"HEAD", "OPTIONS"}):
            catalog[f"{method} {route.path}"] = {"description": route.summary or ""}
    return catalog


@app.get("/api", summary="Describe every available endpoint.")
def get_endpoints() -> dict:
    return {"endpoints": endpoint_catalog(app)}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
