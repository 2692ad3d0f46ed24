"""FastAPI application serving verse lookups to a local note editor."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from versenotes import __version__
from versenotes.api.routes import router

API_PREFIX = "/api/v1"

# Editors running on this machine only; the API is read-only
LOCAL_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1|\[::1\])(:\d+)?$"

app = FastAPI(
    title="versenotes",
    description="Bible reference lookup and live verse suggestions for notes",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=LOCAL_ORIGIN_REGEX,
    allow_methods=["GET"],
)

app.include_router(router, prefix=API_PREFIX)


@app.get("/")
async def root():
    """Service info and endpoint index."""
    return {
        "name": "versenotes",
        "version": __version__,
        "api": API_PREFIX,
        "endpoints": [f"{API_PREFIX}/{name}" for name in ("health", "lookup", "suggest", "books")],
    }
