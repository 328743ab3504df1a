"""Slim entry point – wires up the calculator routers."""
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
import logging

from config import CORS_ORIGINS, LOG_LEVEL, DEFAULT_BAND
from routes.antenna import router as antenna_router
from routes.public import router as public_router

# ── Logging ──
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Antenna Dimension Calculator")

# ── Route routers (all prefixed with /api) ──
app.include_router(public_router, prefix="/api")
app.include_router(antenna_router, prefix="/api")

# ── CORS ──
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Lifecycle ──
@app.on_event("startup")
async def startup_log_settings():
    logger.info(f"Antenna calculator ready (default band {DEFAULT_BAND}, log level {LOG_LEVEL})")
