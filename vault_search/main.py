from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vault_search.api.routes import get_document_source, get_index, router as api_router
from vault_search.config import public_settings, settings, setup_logging

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.reindex_on_startup:
        logger.info("Reindexing vault on startup")
        await get_index().rebuild_from_source(get_document_source())
    yield


app = FastAPI(title="Vault Semantic Search", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("Application starting")
logger.info("Loaded settings: %s", public_settings())


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(api_router)
