# safecall/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, global error handler, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from safecall.routers import auth, vehicles, calls, admin, health
from safecall.database import create_tables, SessionLocal
from safecall.config import settings
from safecall.services.seed import seed_demo_data
from safecall.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="SafeCall API",
    description="Reach a parked car's owner by plate fragment without exposing either phone number.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the web UI is served from another origin) ────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(auth.router,     prefix="/api", tags=["Auth"])
app.include_router(vehicles.router, prefix="/api", tags=["Vehicles"])
app.include_router(calls.router,    prefix="/api", tags=["ARS Calls"])
app.include_router(admin.router,    prefix="/api", tags=["Admin"])
app.include_router(health.router,   prefix="/api", tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("SafeCall backend starting up...")
    create_tables()
    logger.info("Database tables ready")
    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()
    logger.info(f"Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("SafeCall backend shutting down...")
