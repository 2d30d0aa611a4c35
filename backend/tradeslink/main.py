import logging
import sqlite3
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tradeslink.config import settings
from tradeslink.database import SessionLocal, init_db
from tradeslink.errors import MarketError
from tradeslink.logging_config import configure_logging
from tradeslink.middleware import RequestTimeoutMiddleware
from tradeslink.routers import accounts, contractors, credits, jobs, profiles, uploads
from tradeslink.services.account_service import account_service
from tradeslink.services.image_service import ensure_media_dir

logger = logging.getLogger("tradeslink")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    ensure_media_dir()
    init_db()

    conn = sqlite3.connect(str(settings.db_path))
    try:
        result = conn.execute("PRAGMA integrity_check").fetchone()
    finally:
        conn.close()
    if result and result[0] == "ok":
        logger.info("Database integrity check passed.")
    else:
        logger.error("DATABASE INTEGRITY CHECK FAILED: %s", result)

    if settings.seed_demo_data:
        from tradeslink.seed import seed_demo_data

        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()
    yield
    # Shutdown: drop all sign-in sessions
    account_service.clear_sessions()


app = FastAPI(
    title="TradesLink",
    description="Marketplace for construction jobs: credits, contact unlocks and applications",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)


@app.exception_handler(MarketError)
async def market_error_handler(request: Request, exc: MarketError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(accounts.router, prefix=settings.api_prefix)
app.include_router(accounts.auth_router, prefix=settings.api_prefix)
app.include_router(credits.router, prefix=settings.api_prefix)
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(contractors.router, prefix=settings.api_prefix)
app.include_router(profiles.router, prefix=settings.api_prefix)
app.include_router(uploads.router, prefix=settings.api_prefix)
app.include_router(uploads.media_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


def run():
    configure_logging()
    uvicorn.run("tradeslink.main:app", host=settings.host, port=settings.port)
